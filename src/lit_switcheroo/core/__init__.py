"""
Core Package.

Contains the literate document automata:
- Delimiter model and recognition
- Style presets and inference
- Extraction (unlit) and transcoding (relit) automata
- Error model and the Engine facade
"""
