"""Game objects: the player dinosaur and the blocks it meets."""

from __future__ import annotations

from enum import Enum

from .icon import Icon, solid_icon
from .units import GAME_WINDOW_HEIGHT, GAME_WINDOW_WIDTH, Color, Direction, Vec2


class GameObject:
    """Something on the playfield with an icon, a position and a life flag."""

    def __init__(self, icon: Icon, position: Vec2 | None = None) -> None:
        self.icon = icon
        self.position = Vec2(0, 0) if position is None else Vec2(position.x, position.y)
        self.direction = Direction.NONE
        self.alive = True

    def update(self) -> None:
        """Move one step in the current direction, staying inside the playfield."""
        d, p = self.direction, self.position
        if d is Direction.UP and p.y != 0:
            p.y -= 1
        elif d is Direction.LEFT and p.x != 0:
            p.x -= 1
        elif d is Direction.DOWN and p.y < GAME_WINDOW_HEIGHT - 1:
            p.y += 1
        elif d is Direction.RIGHT and p.x < GAME_WINDOW_WIDTH - 1:
            p.x += 1

    def set_direction(self, direction: Direction) -> None:
        self.direction = direction

    def intersect(self, other: object) -> bool:
        """True when ``other`` is a game object at the same position."""
        if not isinstance(other, GameObject):
            return False
        return self.position == other.position

    def on_collision(self, other: object) -> None:
        """Plain objects are unaffected by collisions."""


class BlockType(Enum):
    CACTUS = "cactus"
    COIN = "coin"


class Block(GameObject):
    """An obstacle or a coin scrolling towards the player."""

    def __init__(self, block_type: BlockType, position: Vec2) -> None:
        color = Color.GREEN if block_type is BlockType.CACTUS else Color.YELLOW
        super().__init__(solid_icon(Vec2(1, 1), color), position)
        self.block_type = block_type

    def update(self) -> None:
        """Scroll one column left; die on leaving the playfield."""
        self.position.x -= 1
        if self.position.x < 0:
            self.alive = False

    def on_collision(self, other: object) -> None:
        self.alive = False


# jump state -> (vertical step, next state); 0 is idle
_JUMP_STEPS = {1: (-1, 2), 2: (-1, 3), 3: (1, 4), 4: (1, 0)}


class Dino(GameObject):
    """The player: jumps over cacti and collects coins."""

    def __init__(self) -> None:
        super().__init__(solid_icon(Vec2(1, 1), Color.RED), Vec2(1, 14))
        self.jump_state = 0
        self.score = 0

    def start_jump(self) -> None:
        """Begin a jump unless one is already under way."""
        if self.jump_state == 0:
            self.jump_state = 1

    def update(self) -> None:
        step = _JUMP_STEPS.get(self.jump_state)
        if step is None:
            return
        dy, self.jump_state = step
        self.position.y += dy

    def on_collision(self, other: object) -> None:
        if not isinstance(other, Block):
            return
        if other.block_type is BlockType.COIN:
            self.score += 1
        elif other.block_type is BlockType.CACTUS:
            self.alive = False


def create_player() -> Dino:
    return Dino()


def create_cactus() -> Block:
    return Block(BlockType.CACTUS, Vec2(39, 14))


def create_coin() -> Block:
    return Block(BlockType.COIN, Vec2(39, 14))