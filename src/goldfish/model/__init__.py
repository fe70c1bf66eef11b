"""Card, zone and command types, and the command parser."""
