"""Project creation and relocation steps around the Renamer."""
