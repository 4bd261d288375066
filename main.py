# main.py
import argparse
import logging
import sys

import pygame
from pygame.locals import *

from algorithms import AliasedRasterizer, AntialiasedRasterizer
from canvas import render_panels, save_png
from config import FPS, LOG_LEVEL, SCREEN_H, SCREEN_W, WINDOW_TITLE, WU_COLOR
from lines import build_frame
from samples import Grid
from states import CurveMode

logger = logging.getLogger(__name__)

def init_pygame():
    pygame.init()
    pygame.display.set_mode((SCREEN_W, SCREEN_H), DOUBLEBUF | OPENGL)
    pygame.display.set_caption(WINDOW_TITLE)

def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Aliased (Bresenham) vs antialiased (Xiaolin Wu) lines")
    ap.add_argument("--mode", choices=[m.name.lower() for m in CurveMode], default="sine",
                    help="curve shown at startup (C toggles it in the window)")
    ap.add_argument("--export", metavar="PNG",
                    help="render one frame in software to this file instead of opening a window")
    ap.add_argument("--phase", type=float, default=0.0, help="sine phase used by --export")
    ap.add_argument("--log-level", default=LOG_LEVEL)
    return ap.parse_args(argv)

def make_rasterizers():
    grid = Grid(SCREEN_W, SCREEN_H)
    return AliasedRasterizer(grid), AntialiasedRasterizer(grid, WU_COLOR)

def export_frame(mode, phase, path):
    aliased_rast, wu_rast = make_rasterizers()
    aliased, antialiased = build_frame(mode, phase, aliased_rast, wu_rast)
    logger.info("%s frame: %d aliased, %d antialiased samples",
                mode.name.lower(), len(aliased), len(antialiased))
    return save_png(render_panels(aliased, antialiased, wu_rast.grid), path)

def run_window(mode):
    # deferred so --export works without an OpenGL context
    from renderer_opengl import GLRenderer

    init_pygame()
    try:
        aliased_rast, wu_rast = make_rasterizers()
        renderer = GLRenderer(SCREEN_W, SCREEN_H)
        clock = pygame.time.Clock()
        running = True
        while running:
            clock.tick(FPS)
            for ev in pygame.event.get():
                if ev.type == QUIT:
                    running = False
                elif ev.type == KEYDOWN:
                    if ev.key == K_ESCAPE:
                        running = False
                    elif ev.key == K_c:
                        mode = mode.next()
                        logger.info("curve switched to %s", mode.name.lower())

            phase = pygame.time.get_ticks() / 1000.0
            aliased, antialiased = build_frame(mode, phase, aliased_rast, wu_rast)
            # zero-coverage samples would blend to nothing, skip uploading them
            renderer.draw_frame(aliased_rast.vertices(aliased),
                                wu_rast.vertices(antialiased, drop_transparent=True))
            pygame.display.flip()
    finally:
        pygame.quit()

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    mode = CurveMode[args.mode.upper()]
    if args.export:
        export_frame(mode, args.phase, args.export)
        return 0
    run_window(mode)
    return 0

if __name__ == "__main__":
    sys.exit(main())
