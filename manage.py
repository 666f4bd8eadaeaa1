"""
This is the main file to run the game.
It imports the run function from the space_shooter app and calls it.
"""

from space_shooter.app import run

if __name__ == "__main__":
    run()
