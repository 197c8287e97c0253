"""Frame acquisition and the processing worker thread"""
