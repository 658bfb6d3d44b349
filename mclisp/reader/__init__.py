"""Reader: program text to expression trees."""
