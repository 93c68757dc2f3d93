"""Board helpers: grid ops, collide, merge, sweep, ghost"""
from typing import Optional, List
from tetris_config import CONFIG
from tetris_piece import Piece

Board = List[List[Optional[str]]]


def create_board(cols: Optional[int] = None, rows: Optional[int] = None) -> Board:
    cols = CONFIG["COLS"] if cols is None else cols
    rows = CONFIG["ROWS"] if rows is None else rows
    return [[None]*cols for _ in range(rows)]

def get_cell(board: Board, x: int, y: int) -> Optional[str]:
    return board[y][x]

def set_cell(board: Board, x: int, y: int, t: Optional[str]):
    board[y][x] = t

def remove_row(board: Board, y: int) -> List[Optional[str]]:
    """Pop row y, blank it and push it back in at the top."""
    row = board.pop(y)
    row[:] = [None]*len(row)
    board.insert(0, row)
    return row


def collide(board: Board, piece: Piece) -> bool:
    rows, cols = len(board), len(board[0])
    for bx,by in piece.cells():
        if bx<0 or bx>=cols or by>=rows: return True
        if by>=0 and get_cell(board,bx,by): return True
    return False

def merge(board: Board, piece: Piece):
    # rows above the top edge are dropped
    for bx,by in piece.cells():
        if by>=0: set_cell(board,bx,by,piece.t)

def is_full(board: Board, y: int) -> bool:
    return all(board[y])

def sweep(board: Board) -> int:
    c=0; y=len(board)-1
    while y>=0:
        if is_full(board,y):
            remove_row(board,y); c+=1
        else: y-=1
    return c

def ghost_y(board: Board, piece: Piece) -> int:
    t=piece.copy()
    while not collide(board,t):
        t.y+=1
    return t.y-1
