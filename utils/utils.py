import pynvml
import cpuinfo
import psutil

GPU_NOT_FOUND = "No CUDA enabled GPU found."


def describe_cpu():
    """Brand string of the CPU plus its physical/logical core counts."""
    try:
        brand = cpuinfo.get_cpu_info()['brand_raw']
    except Exception as e:
        brand = f"unknown ({e})"
    physical_cores = psutil.cpu_count(logical=False)
    logical_cores = psutil.cpu_count(logical=True)
    return f"{brand}, {physical_cores} physical / {logical_cores} logical cores"


def describe_gpu():
    try:
        pynvml.nvmlInit()
    except pynvml.NVMLError:
        return GPU_NOT_FOUND
    try:
        name = pynvml.nvmlDeviceGetName(pynvml.nvmlDeviceGetHandleByIndex(0))
        return name.decode('utf-8') if isinstance(name, bytes) else name
    except pynvml.NVMLError:
        return GPU_NOT_FOUND
    finally:
        pynvml.nvmlShutdown()


def print_system_info():
    print(f"Info: CPU: {describe_cpu()}")


def write_result_header(file):
    """Writes the '#' comment lines identifying the machine at the top of a stats file."""
    ram = psutil.virtual_memory()
    file.write(f"# CPU Info: {describe_cpu()}\n")
    file.write(f"# GPU Info: {describe_gpu()}\n")
    file.write(f"# RAM Info: {ram.total / (1024 ** 3):.2f} GB total\n")
