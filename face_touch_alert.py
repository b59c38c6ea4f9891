"""
Face touch alert application.

Warns when a hand comes close to the face in the webcam feed.
"""

import sys

from facetouch.app import main


if __name__ == "__main__":
    sys.exit(main())
