"""PocketTrack - a remaining-balance tracker."""
