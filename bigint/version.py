"""0.0.1"""