import pytest


class FakeScheduler:
    """Stands in for ``tk.Tk.after``: records calls, ``run()`` fires the queue."""

    def __init__(self):
        self.calls = {}
        self.delays = []
        self._next_id = 0

    def after(self, ms, func):
        self._next_id += 1
        self.calls[self._next_id] = func
        self.delays.append(ms)
        return self._next_id

    def after_cancel(self, id):
        self.calls.pop(id, None)

    def run(self):
        calls, self.calls = self.calls, {}
        for func in calls.values():
            func()


@pytest.fixture
def scheduler():
    return FakeScheduler()
