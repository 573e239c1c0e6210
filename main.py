# Ponto de entrada do jogo
# Mantemos esse arquivo mínimo para separar inicialização da lógica do jogo em flappy/game.py.

from flappy.game import Game


def main():
    # Criamos a instância do jogo e chamamos run(), que contém o loop principal.
    # Isso permite importar Game nos testes sem disparar o loop automaticamente.
    game = Game()
    game.run()


if __name__ == "__main__":
    main()
