"""Elements attached to objects: sprites, animations, colliders, bars and text labels."""