"""Test package for the Tencent Cloud provider."""
