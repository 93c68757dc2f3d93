# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG

@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    button_x: int
    button_y: int
    button_w: int
    button_h: int

    def board_to_px(self, bx: int, by: int):
        return self.board_x + bx*self.cell, self.board_y + by*self.cell

    def in_button(self, px: int, py: int) -> bool:
        return (self.button_x <= px < self.button_x + self.button_w
                and self.button_y <= py < self.button_y + self.button_h)

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = 200

    board_w = CONFIG["COLS"] * cell
    board_h = CONFIG["ROWS"] * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    button_w, button_h = panel_w - 24, 36
    button_x = panel_x + 12
    button_y = panel_y + 130

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        button_x=button_x, button_y=button_y,
        button_w=button_w, button_h=button_h,
    )
