from contextlib import contextmanager


@contextmanager
def does_not_raise():
    yield
