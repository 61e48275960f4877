"""The ``handykit`` command-line interface."""
