"""M3UA common header, message types and message decoding."""