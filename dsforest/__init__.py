from typing import Never


class InvalidElementError(ValueError):
    pass


def fail(msg: str, error: type[Exception] = Exception) -> Never:
    raise error(msg)


def fail_if(condition, msg: str, error: type[Exception] = Exception):
    if condition:
        fail(msg, error)
