"""Domain rules (field mapping, entity registry) with no HTTP or storage coupling."""
