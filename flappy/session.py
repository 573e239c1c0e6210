# flappy/session.py
# Estado de uma sessão de jogo e a simulação por frame.
# - três callbacks independentes por frame: mover canos, gravidade, criar canos
# - cada callback se re-agenda enquanto a fase for "playing"
# - sair de "playing" cancela os três handles juntos (nada velho roda depois do reset)
#
# Não depende de janela: o Game desenha lendo este estado, e os testes rodam headless.

import random
import pygame

from flappy.player import Bird
from flappy.pipe import make_pipe_pair
from flappy.scheduler import FrameScheduler

# fases
START = "start"
PLAYING = "playing"
END = "end"

# ---------- PARÂMETROS DE TUNING ----------
MOVE_SPEED = 1.0              # px/frame dos canos
SPAWN_INTERVAL_FRAMES = 120   # um par novo a cada N frames
BIRD_START_Y_FRAC = 0.45
BIRD_X_FRAC = 0.25
BIRD_MIN_X = 20
# -----------------------------------------


class Viewport:
    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height

    def resize(self, width, height):
        self.width = width
        self.height = height

    @property
    def size(self):
        return (self.width, self.height)


class NullAudio:
    """Sink de áudio que não toca nada (testes / sem mixer)."""
    def play_music(self):
        pass

    def stop_music(self):
        pass

    def play_die(self):
        pass


class Session:
    def __init__(self, viewport=None, audio=None, scheduler=None, rng=None):
        self.viewport = viewport if viewport is not None else Viewport()
        self.audio = audio if audio is not None else NullAudio()
        self.scheduler = scheduler if scheduler is not None else FrameScheduler()
        self.rng = rng if rng is not None else random.Random()

        self.state = START
        self.score = 0
        self.bird = Bird()
        # pares (dados: x, scored) e os sprites dos canos, para desenhar e colidir
        self.pipes = []
        self.pipe_sprites = pygame.sprite.Group()
        self.spawn_timer = 0

        # handles dos três callbacks de frame
        self.raf_move_pipes = None
        self.raf_gravity = None
        self.raf_create_pipes = None

    # ----------------- input -----------------
    def handle_input(self):
        """Ação primária (espaço / toque): inicia ou reinicia a corrida, ou faz o flap."""
        if self.state in (START, END):
            self.start()
        elif self.state == PLAYING:
            self.flap()

    def flap(self):
        self.bird.flap()

    # ----------------- lifecycle -----------------
    def start(self):
        self.pipes = []
        self.pipe_sprites.empty()
        self.state = PLAYING
        self.score = 0
        self.spawn_timer = 0

        vw, vh = self.viewport.size
        bird_x = max(BIRD_MIN_X, round(vw * BIRD_X_FRAC))
        self.bird.reset(bird_x, round(vh * BIRD_START_Y_FRAC))
        self.bird.visible = True

        self._audio("play_music")

        self.cancel_loops()
        self.raf_move_pipes = self.scheduler.request(self.move_pipes)
        self.raf_gravity = self.scheduler.request(self.apply_gravity)
        self.raf_create_pipes = self.scheduler.request(self.create_pipes)
        print("Corrida iniciada.")

    def end(self):
        """Transição terminal (colisão ou chão). Chamadas repetidas não fazem nada."""
        if self.state == END:
            return
        self.state = END
        self.bird.visible = False

        self._audio("play_die")
        self._audio("stop_music")

        self.cancel_loops()
        print(f"Game over! Score final: {self.score}")

    def cancel_loops(self):
        self.scheduler.cancel(self.raf_move_pipes)
        self.scheduler.cancel(self.raf_gravity)
        self.scheduler.cancel(self.raf_create_pipes)
        self.raf_move_pipes = self.raf_gravity = self.raf_create_pipes = None

    def _audio(self, action):
        # áudio é fire-and-forget: falha (mixer ausente, arquivo ruim) não para o jogo
        try:
            getattr(self.audio, action)()
        except Exception as e:
            print(f"Aviso: falha no áudio ({action}): {e}")

    # ----------------- per-frame callbacks -----------------
    def move_pipes(self):
        if self.state != PLAYING:
            return

        # iteramos sobre uma cópia: remover da lista não pula nenhum par
        for pair in list(self.pipes):
            pair.move(-MOVE_SPEED)
            if pair.right <= 0:
                self.remove_pipe_pair(pair)

        if pygame.sprite.spritecollideany(self.bird, self.pipe_sprites):
            self.end()
            return

        # passou inteiro pelo pássaro: pontua uma vez só
        for pair in self.pipes:
            if pair.right < self.bird.rect.left and pair.mark_scored():
                self.score += 1

        self.raf_move_pipes = self.scheduler.request(self.move_pipes)

    def apply_gravity(self):
        if self.state != PLAYING:
            return

        hit_floor = self.bird.apply_gravity(self.viewport.height)
        if hit_floor:
            self.end()
            return

        self.raf_gravity = self.scheduler.request(self.apply_gravity)

    def create_pipes(self):
        if self.state != PLAYING:
            return

        self.spawn_timer += 1
        if self.spawn_timer >= SPAWN_INTERVAL_FRAMES:
            self.spawn_timer = 0
            self.spawn_pipe_pair()

        self.raf_create_pipes = self.scheduler.request(self.create_pipes)

    def spawn_pipe_pair(self):
        vw, vh = self.viewport.size
        pair = make_pipe_pair(vw, vh, self.rng)
        self.add_pipe_pair(pair)
        return pair

    def add_pipe_pair(self, pair):
        self.pipes.append(pair)
        self.pipe_sprites.add(*pair.pipes)

    def remove_pipe_pair(self, pair):
        self.pipes.remove(pair)
        pair.kill()

    # ----------------- viewport -----------------
    def on_resize(self, width, height):
        self.viewport.resize(width, height)
        self.bird.clamp_to_viewport(height)
