#!/usr/bin/env python3
"""
Simple test runner for Chirpy.
Run this to execute all tests.
"""

import subprocess
import sys
import os

def run_tests():
    """Run the test suite"""
    print("Running Chirpy Tests")
    print("=" * 40)
    
    # Change to project directory
    os.chdir(os.path.dirname(os.path.abspath(__file__)))
    
    try:
        result = subprocess.run([
            sys.executable, "-m", "pytest", 
            "tests/", 
            "-v", 
            "--tb=short"
        ], check=True)
        
        print("\nAll tests passed!")
        return result.returncode
        
    except subprocess.CalledProcessError as e:
        print(f"\nTests failed with exit code {e.returncode}")
        return e.returncode
    except FileNotFoundError:
        print("pytest not found. Install with: pip install -e .[test]")
        return 1

if __name__ == "__main__":
    sys.exit(run_tests())
