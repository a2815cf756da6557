"""
Services for MorphPhoto.

- corruption_pipeline: decode and classify a single image
- file_scanner_service: source tree enumeration
- path_resolution_service: destination path computation
- organizer_service: run orchestration
- logger: loguru-based logging
"""
