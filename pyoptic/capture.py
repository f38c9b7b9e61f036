class Capture:
    """Focus transform that records every focus it is shown and returns it unchanged.

    Running an optic's update with a capture leaves the source untouched
    (every focus comes back by identity), so it doubles as a reader.
    """

    def __call__(self, value):
        self.record(value)
        return value

    def record(self, value):
        raise NotImplementedError(f'{self.__class__.__name__} is not implemented.')

    @property
    def result(self):
        raise NotImplementedError(f'{self.__class__.__name__} is not implemented.')


class First(Capture):
    def __init__(self, default=None):
        super(First, self).__init__()
        self.found = False
        self.value = default

    def record(self, value):
        if not self.found:
            self.found = True
            self.value = value

    @property
    def result(self):
        return self.value


class Everything(Capture):
    def __init__(self):
        super(Everything, self).__init__()
        self.values = []

    def record(self, value):
        self.values.append(value)

    @property
    def result(self):
        return self.values
