# flappy/background.py
# Fundo com parallax horizontal simples para o jogo.
# - Camada "sky" (céu com nuvens, bem devagar).
# - Camada "ground" (faixa de grama/morros, na velocidade dos canos).
# - Suporta imagens em assets/images/ (nomes padrão abaixo). Se faltarem, usa fallback procedural.
#
# Uso:
#   bg = ParallaxBackground(screen_size=(800, 600))
#   no loop principal:
#       bg.update(scrolling=True)   # só rola durante a corrida
#       bg.draw(screen)
#   quando a janela muda de tamanho:
#       bg.resize((w, h))
#
import os
import math
import pygame

ASSETS_IMAGES = os.path.join(os.path.dirname(__file__), "..", "assets", "images")
SKY_IMG = os.path.join(ASSETS_IMAGES, "bg_sky.png")
GROUND_IMG = os.path.join(ASSETS_IMAGES, "bg_ground.png")

SKY_COLOR = (112, 197, 206)


class ParallaxLayer:
    """Uma camada que pode ser uma imagem (tiled na horizontal) ou um desenho procedural."""
    def __init__(self, screen_size, image_path=None, speed=0.0, kind="sky"):
        """
        screen_size: (w,h)
        image_path: caminho (opcional). Se None ou não existir, usa fallback procedural.
        speed: px/frame para a esquerda
        kind: "sky" ou "ground" (define o fallback)
        """
        self.screen_w, self.screen_h = screen_size
        self.speed = speed
        self.kind = kind
        self.offset = 0.0

        self.image = None
        if image_path and os.path.isfile(image_path):
            try:
                self.image = pygame.image.load(image_path).convert_alpha()
            except Exception as e:
                print(f"Aviso: falha ao carregar {image_path}: {e}")
                self.image = None

    def resize(self, screen_size):
        self.screen_w, self.screen_h = screen_size

    def update(self):
        self.offset += self.speed
        # módulo para o offset não crescer sem limite
        period = self.image.get_width() if self.image else max(1, self.screen_w)
        self.offset %= max(1, period)

    def draw(self, surface):
        if self.image:
            iw, ih = self.image.get_size()
            y = self.screen_h - ih if self.kind == "ground" else 0
            x = -self.offset
            while x < self.screen_w:
                surface.blit(self.image, (int(x), y))
                x += iw
        else:
            self._draw_fallback(surface)

    def _draw_fallback(self, surface):
        w, h = self.screen_w, self.screen_h
        if self.kind == "sky":
            # nuvens: elipses brancas repetidas, deslocadas pelo offset
            step = max(160, w // 4)
            for i in range(-1, w // step + 2):
                cx = int(i * step - self.offset % step)
                cy = int(h * 0.18 + 30 * math.sin(i * 1.7))
                pygame.draw.ellipse(surface, (235, 245, 250), (cx, cy, step // 2, 34))
                pygame.draw.ellipse(surface, (235, 245, 250), (cx + step // 8, cy - 14, step // 4, 34))
        else:
            # morros verdes baixos, na base da tela
            base = int(h * 0.86)
            for i in range(-1, w // 90 + 2):
                x = int(i * 90 - self.offset % 90)
                pygame.draw.ellipse(surface, (90, 170, 80), (x, base, 120, 90))


class ParallaxBackground:
    """
    Combina camadas: céu + morros.
    Instancie e chame update() e draw(surface) do loop principal.
    """
    def __init__(self, screen_size=(800, 600),
                 sky_speed=0.25,
                 ground_speed=1.0,
                 sky_image_path=SKY_IMG,
                 ground_image_path=GROUND_IMG):
        self.screen_size = screen_size
        self.sky_layer = ParallaxLayer(screen_size, image_path=sky_image_path, speed=sky_speed, kind="sky")
        self.ground_layer = ParallaxLayer(screen_size, image_path=ground_image_path,
                                          speed=ground_speed, kind="ground")

    def resize(self, screen_size):
        self.screen_size = screen_size
        self.sky_layer.resize(screen_size)
        self.ground_layer.resize(screen_size)

    def update(self, scrolling=True):
        if not scrolling:
            return
        self.sky_layer.update()
        self.ground_layer.update()

    def draw(self, surface):
        surface.fill(SKY_COLOR)
        self.sky_layer.draw(surface)
        self.ground_layer.draw(surface)
