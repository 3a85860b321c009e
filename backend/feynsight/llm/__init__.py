"""Language-model boundary: intent, physics description and explanation agents."""
