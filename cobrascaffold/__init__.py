"""cobrascaffold -- scaffolding for cobra command-line applications.

Generates the skeleton of a Go application built on cobra and grows it one
subcommand at a time by injecting registrations into the generated root
command file.
"""

__version__ = "0.1.0"
