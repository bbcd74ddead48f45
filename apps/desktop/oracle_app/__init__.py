"""Oracle desktop app and command line tools."""
