class ExitStatus:
    """Process exit status collected while the menu closes.

    The first failure sticks: a clean close that follows it (the window
    losing focus while it is destroyed) never resets it to 0.
    """

    def __init__(self):
        self.code = 0

    def record(self, code: int) -> int:
        if self.code == 0:
            self.code = code
        return self.code

    @property
    def failed(self) -> bool:
        return self.code != 0
