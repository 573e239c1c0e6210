# flappy/pipe.py
# Obstáculos: cada PipePair tem um cano de cima e um de baixo, com a mesma posição
# horizontal e um vão fixo entre eles. O par se move para a esquerda e pontua uma vez
# quando passa inteiro pelo pássaro.
#
# Arquivo de imagem (opcional):
#  assets/images/pipe.png  (desenhado "em pé"; o de cima é espelhado)

import os
import math
import pygame

ASSETS_IMAGES = os.path.join(os.path.dirname(__file__), "..", "assets", "images")
PIPE_IMAGE_PATH = os.path.join(ASSETS_IMAGES, "pipe.png")

# ---------- PARÂMETROS DE TUNING ----------
# tudo proporcional ao tamanho da janela (viewport)
PIPE_MIN_WIDTH = 60
PIPE_WIDTH_FRAC = 0.12
PIPE_HEIGHT_FRAC = 0.9
PIPE_GAP_FRAC = 0.35      # vão grande entre os canos
GAP_TOP_MIN_FRAC = 0.12
GAP_TOP_MAX_FRAC = 0.60   # o vão inteiro fica acima desta fração da altura
# -----------------------------------------

# pipe.png é lido do disco uma vez; as versões escaladas ficam guardadas por (tamanho, flip)
_base_image = None
_base_loaded = False
_image_cache = {}


def clear_image_cache():
    global _base_image, _base_loaded
    _base_image = None
    _base_loaded = False
    _image_cache.clear()


def _load_base_image():
    global _base_image, _base_loaded
    if not _base_loaded:
        _base_loaded = True
        if os.path.isfile(PIPE_IMAGE_PATH):
            try:
                _base_image = pygame.image.load(PIPE_IMAGE_PATH).convert_alpha()
            except Exception as e:
                print(f"Aviso: falha ao carregar {PIPE_IMAGE_PATH}: {e}")
                _base_image = None
    return _base_image


def load_pipe_image(size, flip=False, fallback_color=(80, 190, 70)):
    key = (tuple(size), flip)
    if key in _image_cache:
        return _image_cache[key]

    w, h = size
    base = _load_base_image()
    if base is not None:
        img = pygame.transform.smoothscale(base, size)
        if flip:
            img = pygame.transform.flip(img, False, True)
    else:
        img = pygame.Surface(size, pygame.SRCALPHA)
        pygame.draw.rect(img, fallback_color, (0, 0, w, h))
        pygame.draw.rect(img, (40, 120, 40), (0, 0, w, h), 3)
        # "boca" do cano do lado do vão
        lip_h = min(h, 24)
        lip_y = h - lip_h if flip else 0
        pygame.draw.rect(img, (110, 220, 90), (0, lip_y, w, lip_h))
        pygame.draw.rect(img, (40, 120, 40), (0, lip_y, w, lip_h), 3)

    _image_cache[key] = img
    return img


class Pipe(pygame.sprite.Sprite):
    """Um dos canos do par. A posição é controlada pelo PipePair."""
    def __init__(self, x, y, width, height, flip=False):
        super().__init__()
        self.image = load_pipe_image((width, height), flip=flip)
        self.rect = self.image.get_rect(topleft=(math.floor(x), math.floor(y)))


class PipePair:
    def __init__(self, x, gap_top, gap, width, height):
        self.x = float(x)
        self.gap_top = gap_top
        self.gap = gap
        self.width = width
        self.height = height
        self.top = Pipe(x, gap_top - height, width, height, flip=True)
        self.bottom = Pipe(x, gap_top + gap, width, height)
        self.scored = False

    @property
    def right(self):
        return self.x + self.width

    @property
    def pipes(self):
        return (self.top, self.bottom)

    def move(self, dx):
        self.x += dx
        # floor: o rect nunca fica à direita da posição float (ex.: x=-0.5 -> -1)
        for pipe in self.pipes:
            pipe.rect.x = math.floor(self.x)

    def kill(self):
        """Tira os dois canos de todos os grupos."""
        for pipe in self.pipes:
            pipe.kill()

    def mark_scored(self):
        """Marca o par como pontuado; retorna True só na primeira vez."""
        if self.scored:
            return False
        self.scored = True
        return True


def pipe_dimensions(viewport_width, viewport_height):
    """Retorna (largura, altura, vão, gap_top_min, gap_top_max) para o tamanho da janela."""
    width = round(max(PIPE_MIN_WIDTH, viewport_width * PIPE_WIDTH_FRAC))
    height = round(viewport_height * PIPE_HEIGHT_FRAC)
    gap = round(viewport_height * PIPE_GAP_FRAC)
    gap_top_min = round(viewport_height * GAP_TOP_MIN_FRAC)
    gap_top_max = round(viewport_height * GAP_TOP_MAX_FRAC - gap)
    return width, height, gap, gap_top_min, gap_top_max


def make_pipe_pair(viewport_width, viewport_height, rng):
    """Cria um par na borda direita da janela, com o vão sorteado dentro da faixa segura."""
    width, height, gap, gap_top_min, gap_top_max = pipe_dimensions(viewport_width, viewport_height)
    # se a faixa não couber, ainda sorteamos entre min e min + 1
    span = max(1, gap_top_max - gap_top_min)
    gap_top = rng.randint(gap_top_min, gap_top_min + span)
    return PipePair(viewport_width, gap_top, gap, width, height)
