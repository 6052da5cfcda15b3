"""
Rendering for the visible grid, the counter and the next-piece preview.

Cell sprites are pre-rendered per kind and blitted; the HUD text is cached and
only re-rendered when the counter or the next kind changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from tetris_layout import Dims
from tetris_piece import SHAPES

EMPTY_COLOR = (18,18,18)
BG_COLOR = (10,13,34)
TEXT_COLOR = (200,210,240)

# Colors per piece kind
COLORS: Dict[str, Tuple[int,int,int]] = {
    "ll": (76,175,80),
    "rl": (233,30,99),
    "c": (30,136,229),
    "s": (106,27,154),
    "lz": (255,255,255),
    "rz": (238,238,238),
    "p": (0,200,83),
}

@dataclass
class HudCache:
    score: int = -1
    next_kind: Optional[str] = None
    score_s: Optional[pygame.Surface] = None
    preview: Optional[pygame.Surface] = None

class RenderAssets:
    """Draws frames handed over by the simulation onto `screen`."""
    def __init__(self, screen: pygame.Surface, dims: Dims, font: Optional[pygame.font.Font] = None):
        self.screen = screen
        self.dims = dims
        self.font = font
        self.hud = HudCache()
        self.pv_cell = max(8, dims.cell // 2)
        self.pv_x = dims.panel_x
        self.pv_y = dims.panel_y + 64
        self._make_cells()

    def _make_cells(self):
        c = self.dims.cell
        self.cell_surf: Dict[str, pygame.Surface] = {}
        for t, col in COLORS.items():
            s = pygame.Surface((c, c))
            s.fill(col)
            self.cell_surf[t] = s
        self.empty_surf = pygame.Surface((c, c))
        self.empty_surf.fill(EMPTY_COLOR)

    def cell_rect(self, bx: int, by: int) -> pygame.Rect:
        c = self.dims.cell
        return pygame.Rect(self.dims.board_x + bx*c, self.dims.board_y + by*c, c, c)

    def render(self, grid: List[List[Optional[str]]], score: int, next_kind: Optional[str]):
        self.screen.fill(BG_COLOR)
        # rows below the playfield (the floor marker row) are not drawn
        for y, row in enumerate(grid[:self.dims.rows]):
            for x, t in enumerate(row[:self.dims.cols]):
                surf = self.cell_surf[t] if t else self.empty_surf
                self.screen.blit(surf, self.cell_rect(x, y).topleft)
        self.draw_panel_hud(score, next_kind)

    def _preview(self, kind: str) -> pygame.Surface:
        s = pygame.Surface((self.pv_cell*4, self.pv_cell*4), pygame.SRCALPHA)
        for x, y in SHAPES[kind][0]:
            block = pygame.Surface((self.pv_cell-2, self.pv_cell-2))
            block.fill(COLORS[kind])
            s.blit(block, (x*self.pv_cell+1, y*self.pv_cell+1))
        return s

    def draw_panel_hud(self, score: int, next_kind: Optional[str]):
        d = self.dims
        if next_kind != self.hud.next_kind:
            self.hud.next_kind = next_kind
            self.hud.preview = self._preview(next_kind) if next_kind else None
        if self.hud.preview:
            self.screen.blit(self.hud.preview, (self.pv_x, self.pv_y))
        if self.font is None:
            return
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = self.font.render(f"Count: {score}", True, TEXT_COLOR)
        self.screen.blit(self.hud.score_s, (d.panel_x, d.panel_y))
        self.screen.blit(self.font.render("Next:", True, TEXT_COLOR), (d.panel_x, d.panel_y + 36))

    def draw_game_over(self, font: pygame.font.Font):
        d = self.dims
        msg = font.render("GAME OVER (R to Restart)", True, (255,220,220))
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        self.screen.blit(msg, rect)
