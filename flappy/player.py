# flappy/player.py
# O pássaro controlado pelo jogador.
# - posição vertical e velocidade em float (movimento suave); x fixo durante a corrida
# - gravidade aplicada uma vez por frame; "flap" troca a velocidade por um impulso fixo
# - rotação visual derivada da velocidade (só cosmético, não afeta colisão)
#
# O rect (inteiro) fica sincronizado com a posição float e é o que usamos para colisão.
# Ajuste os parâmetros de TUNING no topo deste arquivo para calibrar a sensação.

import os
import math
import pygame

ASSETS_IMAGES = os.path.join(os.path.dirname(__file__), "..", "assets", "images")
BIRD_IMAGE_PATH = os.path.join(ASSETS_IMAGES, "bird.png")

# ---------- PARÂMETROS DE TUNING ----------
BIRD_SIZE = (48, 36)      # tamanho do sprite e da hitbox (px)
GRAVITY = 0.19            # px/frame² (gravidade leve, mais fácil)
FLAP_POWER = -5.5         # velocidade imposta pelo flap (negativo = sobe)
ROTATION_PER_VELOCITY = 3.0
MIN_ROTATION_DEG = -30.0  # nariz para cima
MAX_ROTATION_DEG = 60.0   # nariz para baixo
# -----------------------------------------


class Bird(pygame.sprite.Sprite):
    def __init__(self, pos=(200, 270)):
        super().__init__()
        self.original_image = None
        if os.path.isfile(BIRD_IMAGE_PATH):
            try:
                img = pygame.image.load(BIRD_IMAGE_PATH).convert_alpha()
                self.original_image = pygame.transform.smoothscale(img, BIRD_SIZE)
            except Exception as e:
                print(f"Aviso: falha ao carregar bird.png: {e}")
                self.original_image = self._make_placeholder()
        else:
            self.original_image = self._make_placeholder()

        self.image = self.original_image
        self.rect = self.image.get_rect(topleft=pos)

        # pos é o topleft em float
        self.pos = pygame.math.Vector2(pos)
        self.velocity = 0.0
        self.rotation = 0.0
        self.visible = False

    def _make_placeholder(self):
        surf = pygame.Surface(BIRD_SIZE, pygame.SRCALPHA)
        w, h = BIRD_SIZE
        pygame.draw.ellipse(surf, (250, 210, 40), (0, 0, w, h))
        pygame.draw.ellipse(surf, (230, 160, 30), (w // 6, h // 2, w // 2, h // 3))
        pygame.draw.circle(surf, (255, 255, 255), (int(w * 0.72), int(h * 0.32)), max(2, h // 6))
        pygame.draw.circle(surf, (20, 20, 20), (int(w * 0.76), int(h * 0.32)), max(1, h // 12))
        pygame.draw.polygon(surf, (240, 100, 30), [(w - 8, h // 2 - 3), (w, h // 2 + 1), (w - 8, h // 2 + 5)])
        return surf

    @property
    def height(self):
        return self.rect.height

    def reset(self, x, y):
        """Coloca o pássaro na posição inicial da corrida, parado e sem rotação."""
        self.pos.x = float(x)
        self.pos.y = float(y)
        self.velocity = 0.0
        self.rotation = 0.0
        self._sync_rect()

    def flap(self):
        self.velocity = FLAP_POWER

    def apply_gravity(self, viewport_height):
        """
        Integra um frame: velocidade += gravidade, posição += velocidade.
        Prende a posição em [0, viewport_height - altura]:
         - teto: zera a velocidade, a corrida continua
         - chão: retorna True (quem chama encerra a corrida)
        """
        self.velocity += GRAVITY
        self.pos.y += self.velocity

        if self.pos.y <= 0:
            self.pos.y = 0.0
            self.velocity = 0.0

        floor = viewport_height - self.height
        if self.pos.y >= floor:
            self.pos.y = float(floor)
            self._sync_rect()
            return True

        self.rotation = max(MIN_ROTATION_DEG, min(MAX_ROTATION_DEG, self.velocity * ROTATION_PER_VELOCITY))
        self._sync_rect()
        return False

    def clamp_to_viewport(self, viewport_height):
        # usado quando a janela muda de tamanho
        if self.pos.y + self.height > viewport_height:
            self.pos.y = float(max(0, viewport_height - self.height))
            self._sync_rect()

    def _sync_rect(self):
        self.rect.x = math.floor(self.pos.x)
        self.rect.y = math.floor(self.pos.y)

    def rotated_image(self):
        """Imagem para desenhar, girada conforme a rotação atual (pygame gira anti-horário)."""
        if not self.rotation:
            return self.original_image
        try:
            return pygame.transform.rotozoom(self.original_image, -self.rotation, 1.0)
        except Exception:
            return pygame.transform.rotate(self.original_image, -self.rotation)
