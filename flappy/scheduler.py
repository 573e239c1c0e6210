# flappy/scheduler.py
# Relógio de frames do jogo: cada callback pedido com request() roda uma vez no
# próximo frame (como requestAnimationFrame). Para continuar rodando, o callback
# pede de novo a si mesmo. cancel() invalida o handle, inclusive se o callback
# já estava na fila do frame corrente.
#
# Uso:
#   sched = FrameScheduler()
#   handle = sched.request(minha_funcao)
#   no loop principal, uma vez por frame:
#       sched.run_frame()
#


class FrameScheduler:
    def __init__(self):
        self._next_handle = 1
        self._pending = {}   # handle -> callback, para o próximo frame
        self._running = {}   # handle -> callback, do frame em execução
        self.frame = 0

    def request(self, callback):
        """Agenda callback para o próximo frame e devolve o handle (int > 0)."""
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel(self, handle):
        if handle is None:
            return
        self._pending.pop(handle, None)
        # cancela também se ainda não rodou neste frame
        self._running.pop(handle, None)

    def run_frame(self):
        """Roda os callbacks pedidos antes deste frame; os novos pedidos ficam para o próximo."""
        self.frame += 1
        self._running = self._pending
        self._pending = {}
        for handle in list(self._running):
            callback = self._running.pop(handle, None)
            if callback is None:
                # cancelado por outro callback durante o frame
                continue
            callback()
        self._running = {}

    def pending_count(self):
        return len(self._pending)
