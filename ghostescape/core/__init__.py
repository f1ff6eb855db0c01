"""The object tree, anchored child elements, scenes and actors."""