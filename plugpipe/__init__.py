# plugpipe - pluggable processing pipeline
# Orchestrators wired by hand to interchangeable capability backends
