# flappy/game.py
# Janela, eventos e desenho do jogo.
# - a simulação fica toda na Session; aqui só traduzimos eventos do pygame e desenhamos o estado
# - ESPAÇO, toque (FINGERDOWN) ou clique esquerdo = ação primária (inicia / flap / reinicia)
# - janela redimensionável: o viewport da Session acompanha o tamanho
#
import os
import pygame

from flappy.audio import SoundBoard
from flappy.background import ParallaxBackground
from flappy.session import Session, Viewport, START, PLAYING, END

# ----------------- Configurações -----------------
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FPS = 60
CAPTION = "Flappy"

ASSETS_DIR = os.path.join(os.path.dirname(__file__), "..", "assets")
IMAGES_DIR = os.path.join(ASSETS_DIR, "images")
GAME_OVER_IMAGE_PATH = os.path.join(IMAGES_DIR, "game_over.png")

FONT_NAME = "arial"
GOLD = (255, 215, 0)
WHITE = (255, 255, 255)


def is_primary_action(event):
    """True para os eventos que contam como ação primária (espaço, toque, clique)."""
    if event.type == pygame.KEYDOWN:
        return event.key == pygame.K_SPACE
    if event.type == pygame.FINGERDOWN:
        return True
    if event.type == pygame.MOUSEBUTTONDOWN:
        # toques também chegam como clique emulado; o FINGERDOWN já contou
        return event.button == 1 and not getattr(event, "touch", False)
    return False


class Game:
    def __init__(self, screen_size=(SCREEN_WIDTH, SCREEN_HEIGHT)):
        pygame.init()

        # janela e clock
        self.screen = pygame.display.set_mode(screen_size, pygame.RESIZABLE)
        pygame.display.set_caption(CAPTION)
        self.clock = pygame.time.Clock()
        self.running = True

        w, h = self.screen.get_size()
        self.session = Session(viewport=Viewport(w, h), audio=SoundBoard())

        try:
            self.background = ParallaxBackground(screen_size=(w, h))
        except Exception as e:
            print(f"Aviso: falha ao criar ParallaxBackground: {e}")
            self.background = None

        # fonts
        self.font_score = pygame.font.SysFont(FONT_NAME, 30, bold=True)
        self.font_message = pygame.font.SysFont(FONT_NAME, 26, bold=True)
        self.font_title = pygame.font.SysFont(FONT_NAME, 48, bold=True)

        self.game_over_image = None
        if os.path.isfile(GAME_OVER_IMAGE_PATH):
            try:
                self.game_over_image = pygame.image.load(GAME_OVER_IMAGE_PATH).convert_alpha()
            except Exception as e:
                print(f"Aviso: falha ao carregar game_over.png: {e}")
                self.game_over_image = None

    # ----------------- main loop -----------------
    def run(self):
        while self.running:
            self.clock.tick(FPS)

            self.handle_events()

            # um tick do relógio de frames: roda os callbacks agendados da Session
            self.session.scheduler.run_frame()

            if self.background:
                try:
                    self.background.update(scrolling=self.session.state == PLAYING)
                except Exception:
                    self.background = None

            self.draw()

        self.quit()

    # ----------------- events -----------------
    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                self.on_resize(event.w, event.h)
            elif is_primary_action(event):
                self.session.handle_input()

    def on_resize(self, width, height):
        self.session.on_resize(width, height)
        if self.background:
            self.background.resize((width, height))

    # ----------------- draw -----------------
    def draw(self):
        if self.background:
            try:
                self.background.draw(self.screen)
            except Exception:
                self.background = None
                self.screen.fill((112, 197, 206))
        else:
            self.screen.fill((112, 197, 206))

        self.session.pipe_sprites.draw(self.screen)

        bird = self.session.bird
        if bird.visible:
            img = bird.rotated_image()
            self.screen.blit(img, img.get_rect(center=bird.rect.center))

        state = self.session.state
        if state == START:
            self._draw_start_message()
        else:
            self._draw_hud()
            if state == END:
                self._draw_game_over()

        pygame.display.flip()

    def _draw_hud(self):
        w, _ = self.screen.get_size()
        title = self.font_score.render("Score: ", True, WHITE)
        value = self.font_score.render(str(self.session.score), True, GOLD)
        x = w // 2 - (title.get_width() + value.get_width()) // 2
        self.screen.blit(title, (x, 16))
        self.screen.blit(value, (x + title.get_width(), 16))

    def _draw_start_message(self):
        w, h = self.screen.get_size()
        parts = [("Press ", WHITE), ("Space", GOLD), (" or Tap to Start", WHITE)]
        surfs = [self.font_message.render(text, True, color) for text, color in parts]
        total_w = sum(s.get_width() for s in surfs)
        panel = pygame.Surface((total_w + 40, surfs[0].get_height() + 24), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 120))
        panel_rect = panel.get_rect(center=(w // 2, h // 2))
        self.screen.blit(panel, panel_rect)
        x = panel_rect.x + 20
        for s in surfs:
            self.screen.blit(s, (x, panel_rect.y + 12))
            x += s.get_width()

    def _draw_game_over(self):
        w, h = self.screen.get_size()
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 110))
        self.screen.blit(overlay, (0, 0))

        center = (w // 2, h // 2 - 30)
        if self.game_over_image is not None:
            img = self.game_over_image
            iw, ih = img.get_size()
            # cabe em 90% da largura e 70% da altura
            scale = min(1.0, (w * 0.9) / iw if iw > 0 else 1.0, (h * 0.7) / ih if ih > 0 else 1.0)
            if scale < 1.0:
                img = pygame.transform.smoothscale(img, (int(iw * scale), int(ih * scale)))
            self.screen.blit(img, img.get_rect(center=center))
        else:
            text = self.font_title.render("GAME OVER", True, (220, 60, 60))
            self.screen.blit(text, text.get_rect(center=center))

        sub = self.font_message.render(f"Score final: {self.session.score}", True, WHITE)
        hint = self.font_message.render("Press Space or Tap to Restart", True, GOLD)
        self.screen.blit(sub, sub.get_rect(center=(w // 2, h // 2 + 40)))
        self.screen.blit(hint, hint.get_rect(center=(w // 2, h // 2 + 80)))

    def quit(self):
        self.session.cancel_loops()
        try:
            pygame.mixer.music.stop()
        except Exception:
            pass
        pygame.quit()
