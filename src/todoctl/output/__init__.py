"""Output layer — display adapters and ServiceResult rendering."""
