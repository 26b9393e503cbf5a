"""Typed helpers for LinkedIn Marketing API resources."""