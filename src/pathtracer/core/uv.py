# core/uv.py
class UV:
    """
    Surface texture coordinate reported by a hit, nominally in [0, 1]^2.
    """
    def __init__(self, u: float = 0.0, v: float = 0.0):
        self.u = u
        self.v = v

    def clamped(self) -> "UV":
        return UV(min(1.0, max(0.0, self.u)), min(1.0, max(0.0, self.v)))

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
