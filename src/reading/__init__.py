"""Reading: a reader that reads books, and an adapter that lets it read e-readers."""
