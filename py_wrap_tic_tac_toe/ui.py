from abc import ABC, abstractmethod

from py_wrap_tic_tac_toe.game import Game
from py_wrap_tic_tac_toe.scene import Scene, build_scene


class Ui(ABC):
    def __init__(self, game: Game) -> None:
        self._game = game
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def game(self) -> Game:
        return self._game

    def run(self) -> None:
        self._running = True

    def _stop(self) -> None:
        self._running = False

    def on_click(self, x: float, y: float) -> None:
        self._game.handle_click(x, y)

    def on_tick(self) -> Scene:
        scene = build_scene(self._game)
        self._render(scene)
        return scene

    @abstractmethod
    def _render(self, scene: Scene) -> None:
        pass
