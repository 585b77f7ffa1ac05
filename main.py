import argparse
import logging
import sys

import pygame
from tetris_config import CONFIG
from tetris_engine import TetrisEngine
from tetris_input import handle_key
from tetris_layout import compute_dims, button_at
from tetris_render import RenderAssets
from tetris_rng import UniformRandom
from tetris_timer import Scheduler

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tetris")
    parser.add_argument("--seed", type=int, default=CONFIG["SEED"],
                        help="seed for the piece randomizer (default: OS entropy)")
    parser.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"],
                        help="pixel size of one board cell")
    parser.add_argument("--log-level", default=CONFIG["LOG_LEVEL"],
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    if args.cell_size <= 0:
        parser.error("--cell-size must be positive")
    return args


def apply_args(args):
    CONFIG["SEED"] = args.seed
    CONFIG["CELL_SIZE"] = args.cell_size
    CONFIG["LOG_LEVEL"] = args.log_level


def main(argv=None):
    apply_args(parse_args(argv))
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format='[TETRIS] %(asctime)s - %(message)s')

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN])

    dims = compute_dims()
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    scheduler = Scheduler()
    with TetrisEngine(scheduler, UniformRandom(CONFIG["SEED"])) as engine:
        engine.start()
        running = True
        while running:
            dt = clock.tick(CONFIG["FPS"])

            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    running = False
                elif e.type == pygame.KEYDOWN:
                    handle_key(engine, e.key)
                elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                    hit = button_at(dims, e.pos)
                    if hit == "start": engine.start()
                    elif hit == "pause": engine.toggle_pause()

            # gravity runs here, after input, on this same thread
            scheduler.advance(dt)

            render.draw(screen, engine.state)
            pygame.display.flip()

    logger.info("bye")
    pygame.quit()
    return 0


if __name__ == '__main__':
    sys.exit(main())
