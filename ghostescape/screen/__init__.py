"""Screen-space elements: buttons, skill icon, stats panel, text boxes and cursor."""