"""Entry points (command-line interface) for handykit."""
