import numpy as np
import pytest
from PIL import Image

from cub3d.colors import convert_color
from cub3d.errors import ConfigError
from cub3d.player import Player
from cub3d.raycast import TEX_HEIGHT, TEX_WIDTH, WIN_HEIGHT, WIN_WIDTH, Ray
from cub3d.render import (
    Texture,
    Textures,
    draw_column,
    draw_floor_ceiling,
    new_frame,
    put_pixel,
    raycast,
    render,
)
from cub3d.textures import TexturePaths

GRID = ["111111", "100001", "10N001", "100001", "111111"]


def solid(color):
    return Texture(np.full((TEX_HEIGHT, TEX_WIDTH), color, dtype=np.uint32))


def make_textures():
    return Textures(
        north=solid(0x111111),
        south=solid(0x222222),
        east=solid(0x333333),
        west=solid(0x444444),
    )


def facing_north():
    player = Player(pos_x=2.5, pos_y=2.5)
    player.set_direction("N")
    return player


def test_new_frame_has_window_shape_and_is_blank():
    frame = new_frame()
    assert frame.shape == (WIN_HEIGHT, WIN_WIDTH)
    assert not frame.any()


def test_put_pixel_sets_in_bounds():
    frame = new_frame()
    put_pixel(frame, 5, 7, 0xABCDEF)
    assert frame[7, 5] == 0xABCDEF


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (WIN_WIDTH, 0), (0, WIN_HEIGHT)])
def test_put_pixel_ignores_out_of_bounds(x, y):
    frame = new_frame()
    put_pixel(frame, x, y, 0xFFFFFF)
    assert not frame.any()


def test_draw_floor_ceiling_splits_at_half():
    frame = draw_floor_ceiling(new_frame(), 0x0000FF, 0x00FF00)
    assert (frame[0] == 0x0000FF).all()
    assert (frame[WIN_HEIGHT // 2 - 1] == 0x0000FF).all()
    assert (frame[WIN_HEIGHT // 2] == 0x00FF00).all()
    assert (frame[WIN_HEIGHT - 1] == 0x00FF00).all()


def test_texture_pixel_in_and_out_of_bounds():
    pixels = np.zeros((2, 3), dtype=np.uint32)
    pixels[1, 2] = 0x123456
    texture = Texture(pixels)
    assert texture.width == 3 and texture.height == 2
    assert texture.pixel(2, 1) == 0x123456
    assert texture.pixel(3, 1) == 0
    assert texture.pixel(-1, 0) == 0
    assert texture.pixel(0, 2) == 0


def test_texture_load_round_trip(tmp_path):
    path = tmp_path / "wall.png"
    image = Image.new("RGB", (2, 2), (10, 20, 30))
    image.putpixel((1, 0), (200, 100, 50))
    image.save(path)
    texture = Texture.load(str(path))
    assert texture.width == 2 and texture.height == 2
    assert texture.pixel(0, 0) == convert_color(10, 20, 30)
    assert texture.pixel(1, 0) == convert_color(200, 100, 50)


def test_textures_for_ray_picks_face():
    textures = make_textures()
    assert textures.for_ray(Ray(side=0, ray_dir_x=1.0)) is textures.east
    assert textures.for_ray(Ray(side=0, ray_dir_x=-1.0)) is textures.west
    assert textures.for_ray(Ray(side=1, ray_dir_y=1.0)) is textures.south
    assert textures.for_ray(Ray(side=1, ray_dir_y=-1.0)) is textures.north


def test_textures_load_reports_missing_file(tmp_path):
    paths = TexturePaths(
        north=str(tmp_path / "missing.xpm"),
        south=str(tmp_path / "missing.xpm"),
        west=str(tmp_path / "missing.xpm"),
        east=str(tmp_path / "missing.xpm"),
    )
    with pytest.raises(ConfigError, match="Failed to load north texture"):
        Textures.load(paths)


def test_textures_load_reads_all(tmp_path):
    names = {}
    for index, name in enumerate(("north", "south", "west", "east")):
        path = tmp_path / f"{name}.png"
        Image.new("RGB", (4, 4), (index, index, index)).save(path)
        names[name] = str(path)
    textures = Textures.load(TexturePaths(**names))
    assert textures.west.pixel(0, 0) == convert_color(2, 2, 2)
    assert textures.east.pixel(3, 3) == convert_color(3, 3, 3)


def test_draw_column_fills_only_the_slice():
    frame = new_frame()
    ray = Ray(line_height=200, draw_start=260, draw_end=460, tex_x=3)
    draw_column(frame, ray, solid(0x00AA00), 10)
    assert (frame[260:460, 10] == 0x00AA00).all()
    assert frame[259, 10] == 0
    assert frame[460, 10] == 0
    assert not frame[:, 11].any()
    assert ray.step == pytest.approx(TEX_HEIGHT / 200)


def test_draw_column_with_texture_column_outside_is_black():
    frame = new_frame()
    frame[:] = 7
    ray = Ray(line_height=100, draw_start=310, draw_end=410, tex_x=TEX_WIDTH + 5)
    draw_column(frame, ray, solid(0xFFFFFF), 0)
    assert (frame[310:410, 0] == 0).all()
    assert frame[309, 0] == 7


def test_raycast_facing_wall_uses_north_texture():
    frame = raycast(new_frame(), facing_north(), GRID, make_textures())
    assert (frame[WIN_HEIGHT // 2] == 0x111111).all()


def test_render_draws_ceiling_floor_and_wall():
    frame = render(new_frame(), facing_north(), GRID, make_textures(), 0xC0C0C0, 0x0F0F0F)
    assert (frame[0] == 0xC0C0C0).all()
    assert (frame[WIN_HEIGHT - 1] == 0x0F0F0F).all()
    assert (frame[WIN_HEIGHT // 2] == 0x111111).all()