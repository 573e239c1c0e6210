# flappy/audio.py
# Sons do jogo: música de fundo em loop e o som de morte.
# Os arquivos são opcionais; sem eles (ou sem mixer) os métodos não fazem nada.
# Erros de reprodução sobem para quem chamou (a Session ignora e segue o jogo).

import os
import pygame

ASSETS_DIR = os.path.join(os.path.dirname(__file__), "..", "assets")
SOUNDS_DIR = os.path.join(ASSETS_DIR, "sounds")

BG_MUSIC_PATH = os.path.join(SOUNDS_DIR, "bg_music.ogg")
DIE_SOUND_PATH = os.path.join(SOUNDS_DIR, "die.mp3")

MUSIC_VOLUME = 0.5


class SoundBoard:
    def __init__(self, music_path=BG_MUSIC_PATH, die_path=DIE_SOUND_PATH):
        self.enabled = True
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except Exception:
            print("Aviso: mixer de áudio não pôde ser inicializado — sem som.")
            self.enabled = False

        self.music = music_path if os.path.isfile(music_path) else None
        self.music_loaded = False

        self.die_sound = None
        if self.enabled and os.path.isfile(die_path):
            try:
                self.die_sound = pygame.mixer.Sound(die_path)
            except Exception as e:
                print(f"Aviso: falha ao carregar {die_path}: {e}")
                self.die_sound = None

    def play_music(self):
        """Toca a música de fundo em loop, sempre do começo."""
        if not (self.enabled and self.music):
            return
        if not self.music_loaded:
            pygame.mixer.music.load(self.music)
            self.music_loaded = True
        pygame.mixer.music.set_volume(MUSIC_VOLUME)
        pygame.mixer.music.play(-1)

    def stop_music(self):
        if self.enabled and self.music_loaded:
            pygame.mixer.music.stop()

    def play_die(self):
        if self.die_sound is not None:
            self.die_sound.play()
