from typing import Iterable

MOD_ADLER = 65521


class RollingAdler32:
    """
    Adler-32 checksum over a sliding window.
    Values are bytes or arbitrary non-negative token ids; both are reduced modulo 65521.
    For a byte window the result equals zlib.adler32(window).
    """

    def __init__(self):
        self.a: int = 1
        self.b: int = 0

    def update(self, value: int):
        self.a = (self.a + value) % MOD_ADLER
        self.b = (self.b + self.a) % MOD_ADLER

    def update_all(self, values: Iterable[int]):
        for value in values:
            self.update(value)

    # Drop the oldest value of a window holding `size` values
    def remove(self, size: int, value: int):
        self.a = (self.a - value) % MOD_ADLER
        self.b = (self.b - 1 - size * value) % MOD_ADLER

    def hash(self) -> int:
        return (self.b << 16) | self.a
