"""Reader and writer for an emulator's INI-style settings file."""
