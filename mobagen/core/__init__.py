"""Engine core: vectors, colours, shapes, game objects, the window and the main loop."""