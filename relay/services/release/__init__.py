"""Release-published jobs: chat announcement and release-notes email."""
