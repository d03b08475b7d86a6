"""Block properties, block components, block states and structures."""