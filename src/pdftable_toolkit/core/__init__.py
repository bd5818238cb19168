"""Core table models shared by layout and output."""
