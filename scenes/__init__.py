"""scenes — The app's screens.

reports_scene   report counts → purple-equivalent / EXP
leveling_scene  character level and experience to a desired level
base            FormScene: fields, buttons, focus and command dispatch
"""
