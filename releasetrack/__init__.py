"""ReleaseTrack Pro API package.

The presence of this file makes ``releasetrack`` a regular package so it is
never resolved as a namespace package spread across site-packages.
"""
