"""Python counterparts of the exercise topics."""