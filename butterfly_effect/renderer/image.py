from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw

from butterfly_effect.components import Direction, Position
from butterfly_effect.render import render_entities
from butterfly_effect.state import State
from butterfly_effect.types import EntityKind

DEFAULT_RESOLUTION = 480
DEFAULT_PADDING_PERCENT = 0.05

Color = Tuple[int, int, int, int]

BACKGROUND_COLOR: Color = (10, 10, 10, 255)
WALL_COLOR: Color = (110, 110, 120, 255)
TRAIL_WALL_COLOR: Color = (150, 90, 200, 255)
GOAL_COLOR: Color = (255, 204, 0, 255)
TOKEN_COLOR: Color = (60, 200, 90, 255)

ColorMap = Dict[EntityKind, Color]

DEFAULT_COLOR_MAP: ColorMap = {
    EntityKind.WALL: WALL_COLOR,
    EntityKind.GOAL: GOAL_COLOR,
    EntityKind.TOKEN: TOKEN_COLOR,
}


def draw_direction_triangle(
    image: Image.Image, origin: Tuple[int, int], size: int, direction: Direction
) -> Image.Image:
    """
    Draw one filled triangle pointing along ``direction`` inside the square
    cell at ``origin``. Screen ``y`` grows downward, grid ``y`` upward.
    """
    if direction == Direction.NEUTRAL:
        return image

    draw = ImageDraw.Draw(image)
    x0, y0 = origin
    cx, cy = x0 + size // 2, y0 + size // 2

    tri_height = max(4, int(size * 0.5))
    tri_half_base = max(3, int(size * 0.3))

    dx, dy = direction.delta
    ux, uy = dx, -dy  # points toward the triangle tip
    px, py = -uy, ux  # perpendicular (for base width)

    # Centroid sits at the cell center; tip 2/3 of the height ahead of it.
    tip_offset = (2.0 / 3.0) * tri_height
    base_offset = (1.0 / 3.0) * tri_height

    tip = (int(round(cx + ux * tip_offset)), int(round(cy + uy * tip_offset)))
    base_x = cx - ux * base_offset
    base_y = cy - uy * base_offset
    p2 = (int(round(base_x + px * tri_half_base)), int(round(base_y + py * tri_half_base)))
    p3 = (int(round(base_x - px * tri_half_base)), int(round(base_y - py * tri_half_base)))

    draw.polygon([tip, p2, p3], fill=(255, 255, 255, 220), outline=(0, 0, 0, 220))
    return image


def render(
    state: State,
    resolution: int = DEFAULT_RESOLUTION,
    padding_percent: float = DEFAULT_PADDING_PERCENT,
    color_map: Optional[ColorMap] = None,
) -> Image.Image:
    """
    Renders the board as a PIL image, one flat-colored square per entity.
    Trail walls get their own tint so bends stand out from the layout.
    """
    grid = state.grid
    cell_size: int = max(1, resolution // grid.width)
    padding: int = int(cell_size * padding_percent)

    if color_map is None:
        color_map = DEFAULT_COLOR_MAP

    img = Image.new(
        "RGBA", (grid.width * cell_size, grid.height * cell_size), BACKGROUND_COLOR
    )
    draw = ImageDraw.Draw(img)

    trail = set(grid.trail_walls) | set(grid.settled_walls)

    def origin(pos: Position) -> Tuple[int, int]:
        return pos.x * cell_size, (grid.height - 1 - pos.y) * cell_size

    for entity in render_entities(state):
        if not grid.in_bounds(entity.position):
            continue
        x0, y0 = origin(entity.position)
        color = color_map[entity.kind]
        if entity.kind == EntityKind.WALL and entity.position in trail:
            color = TRAIL_WALL_COLOR
        draw.rectangle(
            [
                x0 + padding,
                y0 + padding,
                x0 + cell_size - 1 - padding,
                y0 + cell_size - 1 - padding,
            ],
            fill=color,
        )
        if entity.kind == EntityKind.TOKEN and entity.direction is not None:
            draw_direction_triangle(img, (x0, y0), cell_size, entity.direction)

    return img


class ImageRenderer:
    resolution: int
    padding_percent: float
    color_map: ColorMap

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        padding_percent: float = DEFAULT_PADDING_PERCENT,
        color_map: Optional[ColorMap] = None,
    ):
        self.resolution = resolution
        self.padding_percent = padding_percent
        self.color_map = color_map or DEFAULT_COLOR_MAP

    def render(self, state: State) -> Image.Image:
        return render(
            state,
            resolution=self.resolution,
            padding_percent=self.padding_percent,
            color_map=self.color_map,
        )
