"""Host adapters: in-memory, system clipboard, and Textual."""
