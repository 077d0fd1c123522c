import logging
from pathlib import Path
from typing import Final, TypeAlias

import pygame

from py_wrap_tic_tac_toe.exception import GameError
from py_wrap_tic_tac_toe.game import Game
from py_wrap_tic_tac_toe.scene import CircleOutline, LineSegment, Scene
from py_wrap_tic_tac_toe.ui import Ui

_LOG = logging.getLogger(__name__)

Color: TypeAlias = tuple[int, int, int]

BG_COLOR: Final = (0, 0, 0)
BOARD_COLOR: Final = (0, 255, 255)
HIGHLIGHT_COLOR: Final = (218, 112, 214)


def draw_scene(surface: pygame.Surface, scene: Scene, font: pygame.font.Font | None = None) -> None:
    surface.fill(BG_COLOR)
    for primitive in scene.primitives:
        color = HIGHLIGHT_COLOR if primitive is scene.highlight else BOARD_COLOR
        _draw_primitive(surface, primitive, color)

    if scene.message and font is not None:
        text = font.render(scene.message, True, HIGHLIGHT_COLOR)  # noqa: FBT003
        surface.blit(text, (0, 0))


def _draw_primitive(surface: pygame.Surface, primitive: LineSegment | CircleOutline, color: Color) -> None:
    match primitive:
        case LineSegment(start, end, width):
            pygame.draw.line(surface, color, start, end, round(width))
        case CircleOutline(center, radius, width):
            pygame.draw.circle(surface, color, center, radius, round(width))


class PygameUi(Ui):
    TITLE: Final = "Tic Tac Toe"
    FONT_FILE: Final = "DejaVuSerif.ttf"
    FONT_NAME: Final = "dejavuserif"
    FONT_SIZE: Final = 26

    def __init__(self, game: Game, *, fps: int = 60, resources: Path | None = None) -> None:
        super().__init__(game)
        self._fps = fps
        self._resources = resources

    def run(self) -> None:
        pygame.init()
        try:
            self._screen = pygame.display.set_mode(self._game.layout.size)
            pygame.display.set_caption(self.TITLE)
            _LOG.info(
                "pygame %s, SDL %s, video driver %s",
                pygame.version.ver,
                ".".join(str(part) for part in pygame.get_sdl_version()),
                pygame.display.get_driver(),
            )
            self._font = self._load_font()

            super().run()
            self._main_loop()
        finally:
            self._stop()
            pygame.quit()

    def _load_font(self) -> pygame.font.Font:
        if self._resources is not None:
            path = self._resources / self.FONT_FILE
            if path.is_file():
                _LOG.debug("Loading font from %s", path)
                try:
                    return pygame.font.Font(str(path), self.FONT_SIZE)
                except (OSError, pygame.error) as e:
                    msg = f"Could not load font {path}"
                    raise GameError(msg) from e
        return pygame.font.SysFont(self.FONT_NAME, self.FONT_SIZE)

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        while self._running:
            clock.tick(self._fps)
            self._handle_events()
            self.on_tick()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            match event.type:
                case pygame.QUIT:
                    self._stop()
                case pygame.MOUSEBUTTONDOWN if event.button == pygame.BUTTON_LEFT:
                    self.on_click(*event.pos)

    def _render(self, scene: Scene) -> None:
        draw_scene(self._screen, scene, self._font)
        pygame.display.flip()
