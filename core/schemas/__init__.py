"""
FlatBuffers accessors for payloads produced by edge devices.

object_detection_generated.py is flatc output for namespace SmartCamera
(objectdetection.fbs); regenerate it rather than editing by hand.
"""
