"""labelpilot core domains."""
