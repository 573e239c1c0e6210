import random

import pygame
import pytest

from flappy import pipe
from flappy.pipe import PipePair, make_pipe_pair, pipe_dimensions


@pytest.mark.parametrize(
    "a, b, expected",
    [
        # encostados à direita / embaixo: não colidem
        ((0, 0, 10, 10), (10, 0, 10, 10), False),
        ((0, 0, 10, 10), (0, 10, 10, 10), False),
        # sobrepostos em um eixo só
        ((0, 0, 10, 10), (5, 20, 10, 10), False),
        ((0, 0, 10, 10), (20, 5, 10, 10), False),
        # sobrepostos nos dois eixos
        ((0, 0, 10, 10), (9, 9, 10, 10), True),
        ((0, 0, 10, 10), (2, 2, 4, 4), True),
        ((5, 5, 10, 10), (0, 0, 10, 10), True),
    ],
)
def test_colliderect_needs_overlap_on_both_axes(a, b, expected):
    ra, rb = pygame.Rect(a), pygame.Rect(b)
    assert bool(ra.colliderect(rb)) is expected
    assert bool(rb.colliderect(ra)) is expected


def test_pipe_dimensions_are_viewport_proportional():
    assert pipe_dimensions(800, 600) == (96, 540, 210, 72, 150)
    # largura mínima em janelas estreitas
    assert pipe_dimensions(300, 600)[0] == 60


def test_make_pipe_pair_frames_one_gap_at_right_edge():
    rng = random.Random(7)
    for _ in range(50):
        pair = make_pipe_pair(800, 600, rng)
        assert pair.x == 800
        assert 72 <= pair.gap_top <= 150
        assert pair.top.rect.bottom == pair.gap_top
        assert pair.bottom.rect.top == pair.gap_top + 210
        assert pair.top.rect.x == pair.bottom.rect.x == 800
        assert pair.top.rect.size == pair.bottom.rect.size == (96, 540)
        assert pair.scored is False


class _RecordingRng:
    def __init__(self):
        self.args = None

    def randint(self, a, b):
        self.args = (a, b)
        return a


def test_gap_range_is_never_empty(monkeypatch):
    # faixa invertida: max < min
    monkeypatch.setattr(pipe, "GAP_TOP_MAX_FRAC", 0.40)
    rng = _RecordingRng()
    make_pipe_pair(800, 600, rng)
    assert rng.args == (72, 73)


def test_move_updates_both_pipes_and_right_edge():
    pair = PipePair(100, gap_top=200, gap=150, width=60, height=300)
    pair.move(-1.0)
    pair.move(-1.5)

    assert pair.x == pytest.approx(97.5)
    assert pair.right == pytest.approx(157.5)
    assert pair.top.rect.x == pair.bottom.rect.x == 97


def test_mark_scored_only_once():
    pair = PipePair(100, gap_top=200, gap=150, width=60, height=300)
    assert pair.mark_scored() is True
    assert pair.mark_scored() is False
    assert pair.scored is True


def _sprite_at(rect):
    s = pygame.sprite.Sprite()
    s.rect = pygame.Rect(rect)
    return s


@pytest.mark.parametrize(
    "rect, expected",
    [
        ((110, 250, 20, 20), False),  # dentro do vão
        ((110, 190, 20, 20), True),   # pega o cano de cima
        ((110, 340, 20, 20), True),   # pega o cano de baixo
        ((160, 190, 20, 20), False),  # encostado na borda direita
        ((110, 180, 20, 20), True),
        ((110, 330, 20, 20), False),  # encostado no topo do cano de baixo
    ],
)
def test_group_collision_hits_barriers_but_not_gap(rect, expected):
    pair = PipePair(100, gap_top=200, gap=150, width=60, height=300)
    group = pygame.sprite.Group(*pair.pipes)
    hit = pygame.sprite.spritecollideany(_sprite_at(rect), group)
    assert (hit is not None) is expected


def test_kill_removes_both_pipes_from_groups():
    pair = PipePair(100, gap_top=200, gap=150, width=60, height=300)
    group = pygame.sprite.Group(*pair.pipes)
    pair.kill()
    assert len(group) == 0
    assert not pair.top.alive() and not pair.bottom.alive()


def test_rect_follows_float_x_below_zero():
    pair = PipePair(1, gap_top=200, gap=150, width=60, height=300)
    pair.move(-1.5)
    assert pair.x == pytest.approx(-0.5)
    # floor, não truncamento: o rect fica em -1, nunca à direita do float
    assert pair.top.rect.x == pair.bottom.rect.x == -1

    pair.move(-2.25)
    assert pair.top.rect.x == -3


@pytest.fixture
def pipe_png(tmp_path, monkeypatch):
    pygame.display.init()
    pygame.display.set_mode((1, 1))
    path = tmp_path / "pipe.png"
    img = pygame.Surface((20, 80))
    img.fill((10, 200, 10))
    pygame.image.save(img, str(path))
    monkeypatch.setattr(pipe, "PIPE_IMAGE_PATH", str(path))
    pipe.clear_image_cache()
    yield path
    pipe.clear_image_cache()
    pygame.display.quit()


def test_pipe_image_is_read_from_disk_once(pipe_png, monkeypatch):
    loads = []
    real_load = pygame.image.load

    def _counting_load(*args, **kwargs):
        loads.append(args[0])
        return real_load(*args, **kwargs)

    monkeypatch.setattr(pygame.image, "load", _counting_load)

    rng = random.Random(3)
    pairs = [make_pipe_pair(800, 600, rng) for _ in range(5)]

    assert len(loads) == 1
    # mesmo tamanho e orientação: mesma surface escalada
    assert pairs[0].bottom.image is pairs[4].bottom.image
    assert pairs[0].top.image is not pairs[0].bottom.image
    assert pairs[0].top.image.get_size() == (96, 540)


def test_placeholder_is_cached_per_size_and_flip():
    pipe.clear_image_cache()
    a = pipe.load_pipe_image((60, 300))
    b = pipe.load_pipe_image((60, 300))
    c = pipe.load_pipe_image((60, 300), flip=True)
    d = pipe.load_pipe_image((70, 300))
    assert a is b
    assert a is not c
    assert d.get_size() == (70, 300)
