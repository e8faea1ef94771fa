from .mod import helper


def run():
    return helper()
