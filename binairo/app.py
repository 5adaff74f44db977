"""Graphical Binairo game: start dialog, playing grid, pause, reset and timer."""

from __future__ import annotations

import argparse
import time
from typing import Callable, Optional, Sequence, Tuple

from .board import Element, GameBoard
from .play import CantAdd, MoveError, StartError, StartMethod, play_move, start_board

StartChoice = Tuple[StartMethod, str, str]

_PLACEHOLDERS = {
    StartMethod.RANDOM: "Seed Value",
    StartMethod.INPUT: "Board Input",
    StartMethod.FILE: "Default_inputs.txt",
}


class Stopwatch:
    """Counts whole seconds of play and can be paused and resumed."""

    def __init__(self, now: float) -> None:
        self.restart(now)

    def restart(self, now: float) -> None:
        """Start counting again from zero."""
        self._start = now
        self._paused_at: Optional[int] = None

    @property
    def paused(self) -> bool:
        return self._paused_at is not None

    def pause(self, now: float) -> int:
        """Stop counting and return the seconds counted so far."""
        if self._paused_at is None:
            self._paused_at = self.elapsed(now)
        return self._paused_at

    def resume(self, now: float) -> None:
        """Continue counting from where the watch was paused."""
        if self._paused_at is not None:
            self._start = now - self._paused_at
            self._paused_at = None

    def elapsed(self, now: float) -> int:
        """Whole seconds counted up to now."""
        if self._paused_at is not None:
            return self._paused_at
        return int(now - self._start)


def _size_from_text(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


class BinairoApp:
    """The game window; without a Tk root it keeps its state only."""

    def __init__(self, root) -> None:
        self.root = root
        self.board: Optional[GameBoard] = None
        self.fill_symbol = 0
        self.score = 0
        self.score_text = "Score: 0"
        self.time_text = "Time: 0 sec"
        self.paused = False
        self.won = False
        self.messages: list[tuple[str, str]] = []
        self.clock: Callable[[], float] = time.monotonic
        self.stopwatch = Stopwatch(self.clock())
        self.prompt: Callable[[], Optional[StartChoice]] = self._ask_start
        self._buttons: dict[tuple[int, int], object] = {}
        self._controls: list = []
        self._grid_frame = None
        self._score_label = None
        self._time_label = None
        self._fill_var = None
        self._original_bg = None
        if root is not None:
            self._build_top()
            self._tick()

    # -- user-facing actions -------------------------------------------------

    def notify(self, title: str, text: str) -> None:
        """Record a message and show it when there is a window."""
        self.messages.append((title, text))
        if self.root is not None:
            from tkinter import messagebox

            if title in ("Error", "Size too small"):
                messagebox.showerror(title, text, parent=self.root)
            else:
                messagebox.showinfo(title, text, parent=self.root)

    def select_starting_method(self) -> bool:
        """Ask how to start until a board is set up; False if the user cancels."""
        while True:
            choice = self.prompt()
            if choice is None:
                return False
            method, size_text, value = choice
            try:
                board = start_board(StartMethod(method), _size_from_text(size_text), value)
            except StartError as error:
                title = "Size too small" if str(error).startswith("Size") else "Error"
                self.notify(title, str(error))
                continue
            self.board = board
            self.won = False
            self.paused = False
            self.score = 0
            self.score_text = "Score: 0"
            self.stopwatch = Stopwatch(self.clock())
            self._update_time()
            self._build_grid()
            if self.root is not None:
                self.root.deiconify()
            return True

    def handle_cell(self, row: int, col: int) -> bool:
        """Put the current fill symbol in the cell; True if it was placed."""
        if self.board is None or self.paused:
            return False
        moved = False
        try:
            play_move(self.board, str(col + 1), str(row + 1), self.fill_symbol)
            moved = True
        except CantAdd:
            self.notify("Error", "Can't add. Please try valid position.")
        except MoveError as error:
            self.notify("Error", str(error))
        if moved:
            self.score = self.board.size + 5
            self.score_text = f"Score: {self.board.size}"
            button = self._buttons.get((row, col))
            if button is not None:
                button.configure(text=str(self.fill_symbol), state="disabled")
            if self._score_label is not None:
                self._score_label.configure(text=self.score_text)
        if self.board.is_game_over() and not self.won:
            self.won = True
            self._set_background("green")
            self.notify("WON", "You have won the game.")
        return moved

    def toggle_pause(self) -> bool:
        """Pause or resume the game and return whether it is now paused."""
        now = self.clock()
        if not self.paused:
            self.stopwatch.pause(now)
            for button in self._buttons.values():
                button.configure(state="disabled")
            for control in self._controls:
                control.configure(state="disabled")
            self.paused = True
            self.notify("Information", "Game Paused")
        else:
            self.stopwatch.resume(now)
            if self.board is not None:
                for (row, col), button in self._buttons.items():
                    if self.board[row, col] is Element.EMPTY:
                        button.configure(state="normal")
            for control in self._controls:
                control.configure(state="normal")
            self.paused = False
            if self.root is not None:
                self._tick()
        return self.paused

    def reset(self) -> bool:
        """Drop the current board and ask for a new start."""
        self.board = None
        self.won = False
        self.paused = False
        self.score = 0
        self.score_text = "Score: 0"
        self._restore_background()
        return self.select_starting_method()

    # -- window details ------------------------------------------------------

    def _update_time(self) -> None:
        if self.board is not None and self.board.is_game_over():
            return
        self.time_text = f"Time: {self.stopwatch.elapsed(self.clock())} sec"
        if self._time_label is not None:
            self._time_label.configure(text=self.time_text)

    def _tick(self) -> None:
        if self.paused:
            return
        self._update_time()
        self.root.after(1000, self._tick)

    def _set_background(self, colour: str) -> None:
        if self.root is not None:
            self.root.configure(bg=colour)

    def _restore_background(self) -> None:
        if self.root is not None and self._original_bg is not None:
            self.root.configure(bg=self._original_bg)

    def _on_fill_choice(self) -> None:
        self.fill_symbol = int(self._fill_var.get())

    def _build_top(self) -> None:
        import tkinter as tk

        root = self.root
        root.title("Binairo")
        self._original_bg = root.cget("bg")
        top = tk.Frame(root)
        top.pack(side="top", fill="x")
        self._fill_var = tk.StringVar(value="0")
        zero = tk.Radiobutton(
            top, text="0", value="0", variable=self._fill_var, command=self._on_fill_choice
        )
        one = tk.Radiobutton(
            top, text="1", value="1", variable=self._fill_var, command=self._on_fill_choice
        )
        pause = tk.Button(top, text="Pause", command=self.toggle_pause)
        reset = tk.Button(top, text="Reset", command=self.reset)
        self._score_label = tk.Label(top, text=self.score_text, bg="black", fg="white")
        self._time_label = tk.Label(top, text=self.time_text, bg="black", fg="white")
        for widget in (zero, one, pause, reset, self._score_label, self._time_label):
            widget.pack(side="left", padx=2, pady=2)
        self._controls = [zero, one, reset]

    def _build_grid(self) -> None:
        self._buttons = {}
        if self.root is None or self.board is None:
            return
        import tkinter as tk

        if self._grid_frame is not None:
            self._grid_frame.destroy()
        self._grid_frame = tk.Frame(self.root)
        self._grid_frame.pack(side="top")
        if self._score_label is not None:
            self._score_label.configure(text=self.score_text)
        for row in range(self.board.size):
            for col in range(self.board.size):
                cell = self.board[row, col]
                button = tk.Button(
                    self._grid_frame,
                    text=cell.value,
                    width=4,
                    height=2,
                    state="normal" if cell is Element.EMPTY else "disabled",
                    command=lambda r=row, c=col: self.handle_cell(r, c),
                )
                button.grid(row=row, column=col)
                self._buttons[row, col] = button
        for control in self._controls:
            control.configure(state="normal")

    def _ask_start(self) -> Optional[StartChoice]:
        if self.root is None:
            return None
        import tkinter as tk

        dialog = tk.Toplevel(self.root)
        dialog.title("Enter Size & Select Starting Method")
        size_var = tk.StringVar()
        method_var = tk.StringVar(value=StartMethod.RANDOM.value)
        value_var = tk.StringVar()
        hint_var = tk.StringVar(value="Enter Seed Value")

        tk.Label(dialog, text="Size:").grid(row=0, column=0, sticky="w")
        size_entry = tk.Entry(dialog, textvariable=size_var)
        size_entry.grid(row=0, column=1)

        def on_method() -> None:
            method = StartMethod(method_var.get())
            hint_var.set(_PLACEHOLDERS[method])
            size_entry.configure(state="disabled" if method is StartMethod.FILE else "normal")

        for index, (method, label) in enumerate(
            ((StartMethod.RANDOM, "Random"), (StartMethod.INPUT, "Input"), (StartMethod.FILE, "File")),
            start=1,
        ):
            tk.Radiobutton(
                dialog, text=label, value=method.value, variable=method_var, command=on_method
            ).grid(row=index, column=0, columnspan=2, sticky="w")

        tk.Label(dialog, text="Input:").grid(row=4, column=0, sticky="w")
        tk.Entry(dialog, textvariable=value_var).grid(row=4, column=1)
        tk.Label(dialog, textvariable=hint_var, fg="grey").grid(row=5, column=1, sticky="w")

        result: list[StartChoice] = []

        def accept() -> None:
            result.append((StartMethod(method_var.get()), size_var.get(), value_var.get()))
            dialog.destroy()

        buttons = tk.Frame(dialog)
        buttons.grid(row=6, column=0, columnspan=2)
        tk.Button(buttons, text="OK", command=accept).pack(side="left")
        tk.Button(buttons, text="Cancel", command=dialog.destroy).pack(side="left")
        dialog.protocol("WM_DELETE_WINDOW", dialog.destroy)
        dialog.grab_set()
        self.root.wait_window(dialog)
        return result[0] if result else None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window."""
    parser = argparse.ArgumentParser(prog="binairo", description="Play Binairo.")
    parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    root.withdraw()
    app = BinairoApp(root)
    if not app.select_starting_method():
        root.destroy()
        return 0
    root.mainloop()
    return 0