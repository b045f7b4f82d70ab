"""Atlas - magic link resolution for documentation content."""
