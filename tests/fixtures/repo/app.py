import os
import pkg.service as service


def main():
    print(os.getcwd(), service.run())
