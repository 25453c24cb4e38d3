"""
Console interface for the banking session.
"""
from simbank.config import CONFIG, configure_logging
from simbank.menu import MenuController


def main():
    configure_logging(CONFIG)
    MenuController().run()


if __name__ == "__main__":
    main()
