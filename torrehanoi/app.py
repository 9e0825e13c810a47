"""Interactive, animated Towers of Hanoi."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

import pygame

from torrehanoi.discs import create_discs, move_disc, render_discs, reset_moves, update_states
from torrehanoi.results import (
    RESULTS_FILE,
    ResultsRecorder,
    hanoi_moves,
    read_disc_count,
    read_moves,
)
from torrehanoi.wires import WIRE_HEIGHT, create_wires, render_wires

SIZE_W = 800
SIZE_H = 800
FPS = 60
STEP_DELAY_MS = 8
WIRE_COUNT = 3
MIN_SPEED = 0.0
MAX_SPEED = 50.0
SPEED_STEP = 5.0
BACKGROUND = (178, 178, 178)
TEXT_COLOR = (0, 0, 0)
FONT_SIZE = 30
UPPER_LINE_Y = 600
LOWER_LINE_Y = 650

Reader = Callable[[], str]
Writer = Callable[[str], object]


def _console_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


@dataclass(frozen=True)
class Settings:
    """What the player chose before the game starts."""

    discs: int
    speed: float = 20.0


def prompt_settings(read: Reader | None = None, write: Writer | None = None) -> Settings:
    """Ask for the number of discs and the animation speed.

    The speed is asked again until it lies in (0, 50].
    """
    read = read or input
    write = write or _console_write
    write("Discs: ")
    text = read().strip()
    try:
        discs = int(text)
    except ValueError:
        raise ValueError(f"invalid number of discs: {text!r}") from None
    if discs < 1:
        raise ValueError(f"number of discs must be positive: {discs}")
    while True:
        write("Enter the speed in pixels per frame (1-50): ")
        try:
            speed = float(read())
        except ValueError:
            continue
        if MIN_SPEED < speed <= MAX_SPEED:
            return Settings(discs, speed)


def choose_results(
    count: int,
    directory: str | os.PathLike[str] = ".",
    read: Reader | None = None,
    write: Writer | None = None,
) -> ResultsRecorder | list[tuple[int, int]]:
    """Decide between solving anew and replaying stored results.

    Returns a recorder for a fresh solve, or the stored moves to replay when a
    results file for the same number of discs exists and the player wants it.
    """
    read = read or input
    write = write or _console_write
    results_path = Path(directory) / RESULTS_FILE
    try:
        stored: int | None = read_disc_count(results_path)
    except FileNotFoundError:
        write("No previous results file was found.\n")
        stored = None
    write(f"Discs in previous results file: {'none' if stored is None else stored}\n")

    if stored != count:
        write("The number of discs differs. Creating a new results file...\n")
        return ResultsRecorder(count, directory)

    while True:
        write("A compatible results file was found. Use it to show the solution? (y/n)\n")
        answer = read().strip()[:1]
        if answer == "y":
            return read_moves(results_path)
        if answer == "n":
            return ResultsRecorder(count, directory)
        write("Invalid option, try again.\n")


class HanoiApp:
    """The game window: waits for the player, then animates the solution."""

    def __init__(
        self, settings: Settings, source: ResultsRecorder | list[tuple[int, int]]
    ) -> None:
        self.settings = settings
        self.speed = settings.speed
        if isinstance(source, ResultsRecorder):
            self._recorder: ResultsRecorder | None = source
            self._stored_moves: list[tuple[int, int]] | None = None
        else:
            self._recorder = None
            self._stored_moves = list(source)
        self.discs = create_discs(settings.discs, WIRE_HEIGHT)
        self.wires = create_wires(WIRE_COUNT, settings.discs)
        self.paused = False
        self.terminated = False
        self.started = False
        self.finished = False
        self._screen: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None

    def run(self) -> None:
        """Open the window and play until the player quits."""
        pygame.init()
        try:
            self._screen = pygame.display.set_mode((SIZE_W, SIZE_H))
            pygame.display.set_caption("Towers of Hanoi")
            self._font = pygame.font.Font(None, FONT_SIZE)
            self._main_loop()
        finally:
            if self._recorder is not None and not self._recorder.closed:
                self._recorder.discard()
            pygame.quit()

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        while not self.terminated:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type != pygame.KEYDOWN:
                    continue
                if not self.finished:
                    if event.key == pygame.K_e and not self.started:
                        self.started = True
                        self._solve()
                        self.finished = True
                elif event.key == pygame.K_r:
                    self._restart()
                if event.key == pygame.K_ESCAPE:
                    return
            if self.terminated:
                return
            messages: list[tuple[int, str]] = []
            if not self.started:
                messages = [(UPPER_LINE_Y, "Press 'E' to start"), (LOWER_LINE_Y, "Press 'ESC' to quit")]
            if self.finished:
                messages = [(UPPER_LINE_Y, "Press 'R' to restart"), (LOWER_LINE_Y, "Press 'ESC' to quit")]
            self._draw(messages)
            clock.tick(FPS)

    def _restart(self) -> None:
        self.started = False
        self.finished = False
        self.discs = create_discs(self.settings.discs, WIRE_HEIGHT)
        self.wires = create_wires(WIRE_COUNT, self.settings.discs)

    def _solve(self) -> None:
        if self._stored_moves is not None:
            for disc_id, rod_id in self._stored_moves:
                if self.terminated:
                    break
                self._perform(disc_id, rod_id)
            return

        recorder = self._recorder
        self._recorder = None
        try:
            for disc_id, origin, target in hanoi_moves(self.settings.discs, 0, 2, 1):
                if self.terminated:
                    break
                print(f"Move disc {disc_id} from {origin} to {target}")
                if recorder is not None:
                    recorder.record(disc_id, target)
                self._perform(disc_id, target)
        except BaseException:
            if recorder is not None:
                recorder.discard()
            raise
        if recorder is None:
            return
        if self.terminated:
            print("\nAnimation interrupted. Changes discarded.")
            recorder.discard()
        else:
            print("\nAnimation completed. Saving results.")
            recorder.commit()

    def _perform(self, disc_id: int, rod_id: int) -> None:
        update_states(self.discs, self.wires, disc_id, rod_id)
        reset_moves(disc_id, self.discs)
        self._animate(disc_id, rod_id)

    def _animate(self, disc_id: int, rod_id: int) -> None:
        while not self.terminated:
            self._handle_animation_events()
            if self.terminated:
                break
            landed = move_disc(self.discs, self.wires, disc_id, rod_id, self.speed)
            self._draw(
                [
                    (UPPER_LINE_Y, "Increase or decrease speed with < >"),
                    (LOWER_LINE_Y, "Press 'P' to pause"),
                ]
            )
            pygame.time.wait(STEP_DELAY_MS)
            if landed:
                break

    def _handle_animation_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.terminated = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_p:
                    self.paused = not self.paused
                elif event.key == pygame.K_RIGHT:
                    self.speed += SPEED_STEP
                elif event.key == pygame.K_LEFT:
                    if self.speed > SPEED_STEP:
                        self.speed -= SPEED_STEP
                elif event.key == pygame.K_ESCAPE:
                    self.terminated = True

        while self.paused and not self.terminated:
            self._draw([(LOWER_LINE_Y, "PAUSED (press 'P' to continue)")])
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                self.terminated = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_p:
                    self.paused = False
                elif event.key == pygame.K_ESCAPE:
                    self.terminated = True

    def _draw(self, messages: Sequence[tuple[int, str]]) -> None:
        screen = self._screen
        font = self._font
        if screen is None or font is None:
            raise RuntimeError("the game window is not open")
        screen.fill(BACKGROUND)
        for y, text in messages:
            label = font.render(text, True, TEXT_COLOR)
            screen.blit(label, label.get_rect(midtop=(SIZE_W // 2, y)))
        render_wires(screen, self.wires)
        render_discs(screen, self.discs)
        pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for the game settings, then open the game window."""
    parser = argparse.ArgumentParser(
        prog="torrehanoi", description="Animated Towers of Hanoi."
    )
    parser.parse_args(argv)
    try:
        settings = prompt_settings()
        source = choose_results(settings.discs, ".")
    except (EOFError, ValueError) as exc:
        print(f"Error: {exc or 'no input'}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error: could not open the results file: {exc}", file=sys.stderr)
        return 1
    HanoiApp(settings, source).run()
    return 0