"""Convert text objects uploaded to Cloud Storage into spoken-word audio."""

from .segmenter import SegmentationLimits, TextSegmenter, segment_text, split_text

__all__ = ["SegmentationLimits", "TextSegmenter", "segment_text", "split_text"]
