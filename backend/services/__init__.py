"""
Services around the game engine: rendering, the tick driver, the
interactive window and session recording.
"""
