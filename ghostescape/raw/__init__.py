"""Plain game objects: timers, stats, weapons and the star background."""