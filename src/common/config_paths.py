"""
Shared path configuration for the loaders.

Input can be a single adjacency-list file or a MapReduce output directory:
  output-dir/
    _SUCCESS
    part-00000
    part-00001
    ...
"""

# Chỉ đọc các file có tên bắt đầu bằng prefix này trong thư mục input
# (Hadoop ghi part-00000, part-r-00001, ...).
PART_FILE_PREFIX = "part"
