"""Terminal client for the LanChat session coordinator."""
