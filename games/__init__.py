"""Games built on the minigame runtime."""
