"""Domain layer: manifest shape, command resolution, and error taxonomy."""
