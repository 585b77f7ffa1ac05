
"""Key bindings: pygame keys -> engine operations"""
import pygame
from tetris_engine import TetrisEngine, LEFT, RIGHT, DOWN

KEY_BINDINGS = {
    pygame.K_LEFT:  lambda e: e.move(LEFT),
    pygame.K_RIGHT: lambda e: e.move(RIGHT),
    pygame.K_DOWN:  lambda e: e.move(DOWN),
    pygame.K_UP:    lambda e: e.rotate(),
    pygame.K_SPACE: lambda e: e.hard_drop(),
    pygame.K_p:     lambda e: e.toggle_pause(),
}
RESTART_KEYS = (pygame.K_r, pygame.K_RETURN)

def handle_key(engine: TetrisEngine, key: int) -> bool:
    """Dispatch one key press. Returns True if the key was bound."""
    if key in RESTART_KEYS:
        engine.start(); return True
    # everything but restart is dead once the game is over
    if engine.state.game_over: return False
    action = KEY_BINDINGS.get(key)
    if action is None: return False
    action(engine)
    return True
