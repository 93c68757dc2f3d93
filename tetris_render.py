"""
Rendering helpers for the game window.

Everything drawn here comes from a ``Snapshot``; the renderer never reads
or mutates live game state.

- Pre-render one solid and one 20%-alpha ghost sprite per piece colour.
- Pre-render the static background (board well + panel frame).
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from tetris_game import Snapshot, GameStatus
from tetris_layout import Dims

# Colors per piece type
COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (57,197,255),
    "J": (81,108,255),
    "L": (255,169,77),
    "O": (255,224,102),
    "S": (98,227,111),
    "T": (207,114,255),
    "Z": (255,107,107),
}
WELL = (5,5,5)
OUTLINE = (16,16,16)
GHOST_ALPHA = 51   # 20%

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    status: Optional[GameStatus] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    button_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (well + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((18,18,24))
        pygame.draw.rect(self.bg, WELL, (d.board_x, d.board_y, d.board_w, d.board_h))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (28,28,38), panel_rect)
        pygame.draw.rect(self.bg, (60,60,80), panel_rect, 1)

    # ---------- Cell sprites (solid + ghost) ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        edge = max(1, round(c*0.06))
        for t, col in COLORS.items():
            s = pygame.Surface((c, c))
            s.fill(col)
            pygame.draw.rect(s, OUTLINE, (0,0,c,c), edge)
            self.cell_surf[t] = s
            g = pygame.Surface((c, c), pygame.SRCALPHA)
            g.fill((*col, GHOST_ALPHA))
            pygame.draw.rect(g, (*OUTLINE, GHOST_ALPHA), (0,0,c,c), edge)
            self.ghost_surf[t] = g

    def draw_cell(self, screen: pygame.Surface, t: str, bx: int, by: int, ghost: bool = False):
        if by < 0:
            return
        surf = self.ghost_surf[t] if ghost else self.cell_surf[t]
        screen.blit(surf, self.dims.board_to_px(bx, by))

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot):
        screen.blit(self.bg, (0,0))
        for y, row in enumerate(snap.board):
            for x, t in enumerate(row):
                if t:
                    self.draw_cell(screen, t, x, y)
        p = snap.piece
        if p is not None:
            for r, row in enumerate(p.shape):
                for c, v in enumerate(row):
                    if v:
                        self.draw_cell(screen, p.t, p.x + c, snap.ghost_y + r, ghost=True)
            for bx, by in p.cells():
                self.draw_cell(screen, p.t, bx, by)
        self.draw_panel_hud(screen, snap)
        if snap.status is GameStatus.GAME_OVER:
            self.draw_game_over(screen)

    def draw_game_over(self, screen: pygame.Surface):
        d = self.dims
        band = pygame.Surface((d.board_w, 6*d.cell), pygame.SRCALPHA)
        band.fill((0,0,0,178))
        screen.blit(band, d.board_to_px(0, 7))
        cx = d.board_x + d.board_w // 2
        msg = self.big_font.render("GAME OVER", True, (255,255,255))
        screen.blit(msg, msg.get_rect(center=(cx, d.board_to_px(0, 9)[1] + d.cell // 2)))
        hint = self.font.render("Press Start to play again", True, (255,255,255))
        screen.blit(hint, hint.get_rect(center=(cx, d.board_to_px(0, 10)[1] + d.cell)))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        f = self.font
        if snap.score != self.hud.score:
            self.hud.score = snap.score
            self.hud.score_s = f.render(f"Score: {snap.score}", True, (220,220,235))
        if snap.level != self.hud.level:
            self.hud.level = snap.level
            self.hud.level_s = f.render(f"Level: {snap.level}", True, (220,220,235))
        if snap.lines != self.hud.lines:
            self.hud.lines = snap.lines
            self.hud.lines_s = f.render(f"Lines: {snap.lines}", True, (220,220,235))
        if snap.status != self.hud.status:
            self.hud.status = snap.status
            label = "Restart" if snap.status is not GameStatus.NOT_STARTED else "Start"
            self.hud.button_s = f.render(label, True, (15,15,20))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 16))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 72))
        button = pygame.Rect(d.button_x, d.button_y, d.button_w, d.button_h)
        pygame.draw.rect(screen, (57,197,255), button, border_radius=6)
        screen.blit(self.hud.button_s, self.hud.button_s.get_rect(center=button.center))
        # Controls legend
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (220,220,235)),
                f.render("←/→ Move", True, (165,165,190)),
                f.render("↓ Soft drop", True, (165,165,190)),
                f.render("↑ / X Rot CW", True, (165,165,190)),
                f.render("Z Rot CCW", True, (165,165,190)),
                f.render("Space Hard drop", True, (165,165,190)),
                f.render("Enter / R Start", True, (165,165,190)),
            ]
        y = d.button_y + d.button_h + 24
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
