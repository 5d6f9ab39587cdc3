from cssdecl.cli.main import cli

__all__ = ["cli"]
