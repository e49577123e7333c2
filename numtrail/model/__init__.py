"""Result types returned by the trail pipeline."""
