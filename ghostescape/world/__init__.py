"""World-space objects: one-shot effects and spells."""