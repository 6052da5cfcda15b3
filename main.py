import argparse
import logging
import sys

import pygame

from tetris import Tetris
from tetris_config import CONFIG, tick_interval_ms
from tetris_input import KeyboardControl
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import PieceRandom
from tetris_scheduler import TICK_EVENT, PygameScheduler

logger = logging.getLogger("tetris.main")


class PygameAdapter:
    """Presentation side of the game: draws frames, forwards key presses."""

    def __init__(self, render: RenderAssets, keys: KeyboardControl):
        self.assets = render
        self.keys = keys

    def render(self, grid, score, next_kind):
        self.assets.render(grid, score, next_kind)

    def control(self, move):
        return self.keys.control(move)

    def release(self, handle):
        self.keys.release(handle)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Falling-block puzzle")
    parser.add_argument('--width', type=int, default=CONFIG["WIDTH"], help='Board width in cells')
    parser.add_argument('--height', type=int, default=CONFIG["HEIGHT"], help='Visible board height in cells')
    parser.add_argument('--cell-size', type=int, default=CONFIG["CELL_SIZE"], help='Cell size in pixels')
    parser.add_argument('--seed', type=int, default=CONFIG["SEED"], help='Seed for piece draws')
    parser.add_argument('--log-level', default='INFO', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format='[TETRIS] %(asctime)s %(name)s - %(message)s')
    CONFIG.update(WIDTH=args.width, HEIGHT=args.height, CELL_SIZE=args.cell_size, SEED=args.seed)

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, TICK_EVENT])

    dims = compute_dims(args.width, args.height, args.cell_size)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 26)
    big_font = pygame.font.SysFont(None, 36)

    scheduler = PygameScheduler()
    game = Tetris(args.width, args.height, rng=PieceRandom(args.seed),
                  scheduler=scheduler, interval_ms=tick_interval_ms())
    render = RenderAssets(screen, dims, font)
    adapter = PygameAdapter(render, KeyboardControl(drop_repeat=game.height))
    game.run(adapter)

    clock = pygame.time.Clock()
    shown_game_over = False
    while True:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                game.stop()
                pygame.quit()
                logger.info("quit with score %d", game.score)
                return 0
            if e.type == pygame.KEYDOWN and e.key == pygame.K_r:
                game.reset(); shown_game_over = False
                continue
            if scheduler.dispatch(e):
                continue
            adapter.keys.handle(e)

        if not game.is_running and not shown_game_over:
            render.draw_game_over(big_font)
            shown_game_over = True
        pygame.display.flip()
        clock.tick(60)


if __name__ == '__main__':
    sys.exit(main())
