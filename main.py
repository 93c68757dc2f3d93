import logging
import pygame, sys
from tetris_config import CONFIG
from tetris_game import Game, Command
from tetris_input import command_for_key
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import PieceRandomizer


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(
        level=CONFIG["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont(None, 44)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()
    game = Game(PieceRandomizer(CONFIG["SEED"]))

    while True:
        dt = clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                cmd = command_for_key(e.key)
                if cmd is not None:
                    game.handle(cmd)
            if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if dims.in_button(*e.pos):
                    game.handle(Command.START)

        game.tick(dt)
        render.draw(screen, game.snapshot())
        pygame.display.flip()


if __name__ == '__main__':
    main()
