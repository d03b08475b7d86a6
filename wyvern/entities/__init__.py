"""Entity components and data, entity handles, physics and attributes."""