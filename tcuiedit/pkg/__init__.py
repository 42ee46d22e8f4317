"""UI packages: their file sections, string tables and category index."""