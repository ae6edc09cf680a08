"""M3UA common and protocol-specific parameters, their builders and nested payloads."""