from typing import Optional

from .uniform_source import UniformSource


class RareEventDraw:
    """
    RareEventDraw

    Models a "ten-pull": a fixed-size batch of independent Bernoulli draws.
    Each draw pulls one value from the uniform source and counts as a hit
    when that value is strictly below `probability`.

        hits = #{ i < batch_size : u_i < probability }

    burn() performs the same batches but throws the outcome away. It exists
    so that a strategy can spend randomness (advance the stream) exactly as
    a real batch would, without touching its own bookkeeping.

    The instance keeps a running count of single draws for inspection.
    Not thread-safe.
    """

    def __init__(
        self,
        probability: float,
        batch_size: int = 10,
        source=None,
        seed: Optional[int] = None,
    ):
        if not 0.0 <= probability <= 1.0:
            raise ValueError("probability must be in [0, 1]")
        if batch_size <= 0:
            raise ValueError("batch_size must be > 0")

        self.probability = float(probability)
        self.batch_size = batch_size
        self.source = source if source is not None else UniformSource(seed)

        self._draws = 0

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def draw_batch(self) -> int:
        """
        Perform one batch and return the number of hits (0..batch_size).
        """
        hits = 0
        for _ in range(self.batch_size):
            if self.source.next() < self.probability:
                hits += 1
        self._draws += self.batch_size
        return hits

    def burn(self, batches: int) -> None:
        """
        Consume `batches` full batches of randomness, discarding results.
        """
        if batches < 0:
            raise ValueError("batches must be >= 0")

        for _ in range(batches):
            self.draw_batch()

    # ------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------

    def draws_consumed(self) -> int:
        return self._draws

    def reset_counter(self) -> None:
        self._draws = 0
