"""Keyboard -> game command mapping"""
from typing import Optional
import pygame
from tetris_game import Command

KEYMAP = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE_CW,
    pygame.K_x: Command.ROTATE_CW,
    pygame.K_z: Command.ROTATE_CCW,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_RETURN: Command.START,
    pygame.K_KP_ENTER: Command.START,
    pygame.K_r: Command.START,
}

def command_for_key(key: int) -> Optional[Command]:
    return KEYMAP.get(key)
