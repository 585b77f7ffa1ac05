
"""
Rendering helpers for the Tetris project.

- Pre-render cell Surfaces per colour once per cell size and blit them.
- Pre-render the static background (grid + panel frame).
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from tetris_layout import Dims, button_rects
from tetris_piece import COLS, ROWS
from tetris_engine import GameState

# Colors per tetromino type; locked cells lose their kind and share LOCKED
COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (102,224,255),
    "J": (106,119,255),
    "L": (255,158,94),
    "O": (255,224,102),
    "S": (94,224,142),
    "T": (200,119,255),
    "Z": (255,102,119),
}
LOCKED = (102,102,102)
TEXT = (200,210,240)

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None
    button_labels: Optional[dict] = None
    button_s: Optional[dict] = None

def overlay_message(state: GameState) -> Optional[str]:
    # an untouched board never shows the game-over banner
    if state.game_over:
        return "GAME OVER" if any(any(r) for r in state.board) else None
    if state.paused: return "PAUSED"
    return None

def button_labels(state: GameState) -> Dict[str, str]:
    return {
        "start": "Start" if state.game_over or state.piece is None else "Restart",
        "pause": "Resume" if state.paused else "Pause",
    }

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.buttons = {k: pygame.Rect(r) for k,r in button_rects(dims).items()}

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((17,17,17))
        grid_col = (68,68,68)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    def _make_cells(self):
        c = self.dims.cell
        self.cell_surf: Dict[str, pygame.Surface] = {}
        for t, col in list(COLORS.items()) + [("#", LOCKED)]:
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[t] = s

    def draw_cell(self, screen: pygame.Surface, t: str, bx: int, by: int):
        rx = self.dims.board_x + bx*self.dims.cell + 1
        ry = self.dims.board_y + by*self.dims.cell + 1
        screen.blit(self.cell_surf[t], (rx, ry))

    # ---------- Board + active piece ----------
    def draw_board(self, screen: pygame.Surface, state: GameState):
        for y,row in enumerate(state.board):
            for x,v in enumerate(row):
                if v: self.draw_cell(screen, "#", x, y)
        p = state.piece
        if p is not None:
            for bx,by in p.cells():
                if 0 <= bx < COLS and 0 <= by < ROWS:
                    self.draw_cell(screen, p.t, bx, by)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int, level: int, lines: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("TETRIS", True, (197,202,233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT)
        if level != self.hud.level:
            self.hud.level = level
            self.hud.level_s = f.render(f"Level: {level}", True, TEXT)
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, TEXT)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Down", True, (165,175,215)),
                f.render("↑ Rotate", True, (165,175,215)),
                f.render("Space Hard drop", True, (165,175,215)),
                f.render("P Pause • R Restart", True, (165,175,215)),
            ]
        y = d.panel_y + 140
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def draw_buttons(self, screen: pygame.Surface, state: GameState):
        labels = button_labels(state)
        if labels != self.hud.button_labels:
            self.hud.button_labels = labels
            self.hud.button_s = {k: self.font.render(v, True, TEXT) for k,v in labels.items()}
        for name, rect in self.buttons.items():
            pygame.draw.rect(screen, (40,50,90), rect)
            pygame.draw.rect(screen, (90,100,150), rect, 1)
            txt = self.hud.button_s[name]
            screen.blit(txt, txt.get_rect(center=rect.center))

    def draw_overlay(self, screen: pygame.Surface, state: GameState):
        d = self.dims
        msg = overlay_message(state)
        if msg is None: return
        s = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA)
        s.fill((0,0,0,160))
        screen.blit(s, (d.board_x, d.board_y))
        txt = self.big_font.render(msg, True, (255,220,220))
        screen.blit(txt, txt.get_rect(center=(d.board_x + d.board_w//2, d.board_y + d.board_h//2)))

    def draw(self, screen: pygame.Surface, state: GameState):
        screen.blit(self.bg, (0,0))
        self.draw_board(screen, state)
        self.draw_panel_hud(screen, state.score, state.level, state.lines)
        self.draw_buttons(screen, state)
        self.draw_overlay(screen, state)
