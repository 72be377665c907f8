"""Release-feed update checks and site-wide admin settings."""
