"""Infrastructure implementations (child processes)."""
